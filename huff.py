import sys

from huffman_tools import frequency, huffman

commands = {
    "huffman": huffman.main,
    "frequency": frequency.main,
}


def main() -> None:
    if len(sys.argv) < 2 or sys.argv[1] not in commands:
        print(f"Please specify a script to execute: [{', '.join([k for k in commands.keys()])}]")
        sys.exit(1)
    script_name = sys.argv[1]
    commands[script_name](sys.argv[2:])


if __name__ == "__main__":
    main()
