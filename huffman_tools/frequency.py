from argparse import ArgumentParser
from pathlib import Path
import sys

from huffman_tools.common.strings.alphabet import frequencies, nub
from huffman_tools.common.strings.display import print_frequencies


def main(argv: list[str]) -> None:
    """Main entry point for the program."""
    parser = ArgumentParser(description='Letter frequency report')

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument('-s', '--source-file', type=str,
                              help='File holding the text to analyse')
    source_group.add_argument('-S', '--source-text', type=str,
                              help='Text to analyse')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable coloured output')

    # Parse the arguments
    args = parser.parse_args(argv)

    if args.source_text is not None:
        source = args.source_text
    else:
        inpath = Path(args.source_file)
        if not inpath.is_file():
            raise parser.error(f'{args.source_file} does not exist.')
        source = inpath.read_text(encoding="utf-8").strip("\n\r")

    if not source:
        parser.error('source text is empty.')

    alphabet = nub(source)
    print(f"Alphabet: {alphabet!r}")
    print_frequencies(frequencies(source), not args.no_color)
    print(f"Counted {len(source)} characters, {len(alphabet)} distinct.")


if __name__ == '__main__':
    main(sys.argv[1:])
