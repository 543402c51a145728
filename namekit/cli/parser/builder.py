from argparse import ArgumentParser

from namekit.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="NameKit - CLI for assembling, linking and running programs with NAME MIPS toolchain",
        usage=f"{prog} files... [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Input assembly source files (`.asm` files)",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_pipeline_group(parser)
    groups.add_toolchain_group(parser)
    groups.add_debug_group(parser)
    return parser
