"""
Print every 256-color code with its number, for picking palette colors
"""

from prefixed_formatter import color_code
from prefixed_formatter.colors import RESET


def main():
    for i in range(256):
        print(f"{color_code(str(i))}Code: [{i}] {RESET}")


if __name__ == "__main__":
    main()
