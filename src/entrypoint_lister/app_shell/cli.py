import argparse
import logging
from pathlib import Path

from entrypoint_lister.adapters.webpack_stats import read_webpack_stats
from entrypoint_lister.core.errors import BuildGraphError, OptionsError
from entrypoint_lister.rules import ListerOptions, load_options
from entrypoint_lister.shell.hooks import BuildHooks, EntrypointListerPlugin

logger = logging.getLogger("cli")

CONFIG_PATH = "entrypoint-lister.yaml"


def get_options(args: argparse.Namespace) -> ListerOptions:
    config_path = Path(args.config) if args.config else Path(CONFIG_PATH)
    if config_path.exists():
        options = load_options(config_path)
        logger.debug(f"Loaded options from {config_path}")
    elif args.config:
        raise FileNotFoundError(f"Options file {config_path} not found.")
    else:
        options = ListerOptions()

    overrides = {}
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.output_filename:
        overrides["output_filename"] = args.output_filename
    return options.model_copy(update=overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entrypoint-lister",
        description="Write an entrypoint manifest for a completed webpack build",
    )
    parser.add_argument("stats", help="Path to webpack stats JSON (webpack --json)")
    parser.add_argument(
        "--output-path", help="Build output directory (default: outputPath from stats)"
    )
    parser.add_argument(
        "--config", help=f"Options file (default: ./{CONFIG_PATH} if present)"
    )
    parser.add_argument("--output-dir", help="Directory to write the manifest into")
    parser.add_argument("--output-filename", help="Manifest filename")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        options = get_options(args)
        event = read_webpack_stats(Path(args.stats), output_path=args.output_path)
    except (FileNotFoundError, OptionsError, BuildGraphError) as e:
        logger.error(str(e))
        return 1

    hooks = BuildHooks()
    EntrypointListerPlugin(options).apply(hooks)
    for written in hooks.done.call(event):
        print(f"Manifest written: {written}")
    return 0
