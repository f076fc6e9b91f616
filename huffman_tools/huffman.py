import argparse
import sys
from pathlib import Path

from huffman_tools.common.strings.alphabet import nub
from huffman_tools.common.strings.display import print_codes, print_tree, print_tree_list
from huffman_tools.common.strings.encode_decode import decode, encode
from huffman_tools.common.strings.huffman_tree import HuffmanTreeList, build


def read_source(args: argparse.Namespace) -> str:
    """Returns the text the Huffman tree is built from."""
    if args.source_text is not None:
        return args.source_text
    source_path = Path(args.source_file)
    if not source_path.exists():
        raise FileNotFoundError(f"Source file {source_path} not found.")
    return source_path.read_text(encoding="utf-8").strip("\n\r")


def read_input(args: argparse.Namespace) -> str:
    input_path = Path(args.input_file[0])
    if not input_path.exists():
        raise FileNotFoundError(f"Input file {input_path} not found.")
    return input_path.read_text(encoding="utf-8").strip("\n\r")


def set_default_output(args: argparse.Namespace, ext: str) -> argparse.Namespace:
    """Set the default output file path if not provided."""
    if not args.output:
        args.output = f"{Path(args.input_file[0]).stem}.{ext}"
    return args


def tree_func(args: argparse.Namespace) -> None:
    """Print the Huffman tree built from the source text."""
    source = read_source(args)
    if args.list:
        print_tree_list(HuffmanTreeList.build(source, nub(source)), not args.no_color)
    print_tree(build(source), not args.no_color)


def codes_func(args: argparse.Namespace) -> None:
    """Print the code word of every character of the source text."""
    print_codes(build(read_source(args)), not args.no_color)


def encode_func(args: argparse.Namespace) -> None:
    """Encode the input text and write the path symbols to the output file."""
    args = set_default_output(args, "code")
    tree = build(read_source(args))
    text = read_input(args)

    code = encode(tree, text)
    Path(args.output).write_text(code, encoding="utf-8")

    print(f"Encoded {len(text)} characters to {len(code)} path symbols, {args.input_file[0]} to {args.output}.")


def decode_func(args: argparse.Namespace) -> None:
    """Decode the input path symbols and write the text to the output file."""
    args = set_default_output(args, "txt")
    tree = build(read_source(args))
    code = read_input(args)

    text = decode(tree, code)
    Path(args.output).write_text(text, encoding="utf-8")

    print(f"Decoded {len(code)} path symbols to {len(text)} characters, {args.input_file[0]} to {args.output}.")


def add_source_args(parser: argparse.ArgumentParser) -> None:
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument('-s', '--source-file', type=str, help='File holding the text to build the Huffman tree from')
    source_group.add_argument('-S', '--source-text', type=str, help='Text to build the Huffman tree from')
    parser.add_argument('--no-color', action='store_true', help='Disable coloured output')


def build_argparser() -> argparse.ArgumentParser:
    # Create the main parser
    parser = argparse.ArgumentParser(description='Build Huffman trees and encode or decode text')

    # Create subparsers for each mode
    subparsers = parser.add_subparsers(title='Modes', help='Select a mode')

    # Create the subparser for tree mode
    tree_parser = subparsers.add_parser('tree', help='Print the Huffman tree')
    add_source_args(tree_parser)
    tree_parser.add_argument('--list', action='store_true', help='Also print the initial Huffman tree list')
    tree_parser.set_defaults(func=tree_func)

    # Create the subparser for codes mode
    codes_parser = subparsers.add_parser('codes', help='Print the Huffman code table')
    add_source_args(codes_parser)
    codes_parser.set_defaults(func=codes_func)

    # Create the subparser for encode mode
    encode_parser = subparsers.add_parser('encode', help='Encode text')
    add_source_args(encode_parser)
    encode_parser.add_argument('-o', '--output', type=str, help='Output file for the code (defaults to <input>.code)')
    encode_parser.add_argument('input_file', nargs=1, type=str, help='Input file (text file)')
    encode_parser.set_defaults(func=encode_func)

    # Create the subparser for decode mode
    decode_parser = subparsers.add_parser('decode', help='Decode text')
    add_source_args(decode_parser)
    decode_parser.add_argument('-o', '--output', type=str, help='Output file for the text (defaults to <input>.txt)')
    decode_parser.add_argument('input_file', nargs=1, type=str, help='Input file (code file)')
    decode_parser.set_defaults(func=decode_func)

    return parser


def main(argv: list[str]) -> None:
    """Main entry point for the program."""
    # Make the parser
    parser = build_argparser()
    # Parse the arguments
    args = parser.parse_args(argv)
    # Run the command
    if "func" in args:
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main(sys.argv[1:])
