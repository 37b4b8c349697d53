#!/usr/bin/env python3
"""
macrotags - Macro tag conversion for rich-text content

Batch-converts content files between the stored macro tag format and the
placeholder blocks shown in a rich-text editor, or dumps the text/macro
event stream a renderer would consume.

As with other ChRIS plugins, the app reads from an input directory and
writes to an output directory.

Directions:
    editor      <?UMBRACO_MACRO macroAlias="x" />  ->  <div class="umb-macro-holder">...</div>
    persisted   <div class="umb-macro-holder">...</div>  ->  <?UMBRACO_MACRO macroAlias="x" />
    scan        content -> <name>.events.yaml listing text segments and macros

Usage:
    macrotags inputdir/ outputdir/ --direction editor

Examples:
    # Prepare stored pages for the editor
    macrotags pages/ editor/ --direction editor --htmlAttribute data-load-content=false

    # Strip editor blocks before storing
    macrotags editor/ pages/ --direction persisted --filePattern '**/*.html'

    # Inspect what a renderer would see, with highlighted output
    macrotags pages/ events/ --direction scan --show -vv
"""

import sys
from pathlib import Path
from typing import Dict, List
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Converter, MacroTagError, __version__, LOG, state_connectToLogger
from .lib.converter import DIRECTIONS
from .lib.lexer import markup_highlight
from .models import ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="macrotags - convert macro tags between stored and rich-text editor formats",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--direction",
    default="editor",
    choices=DIRECTIONS,
    help="Conversion direction",
)

parser.add_argument(
    "--filePattern",
    default=None,
    type=str,
    help=f"Glob selecting input files relative to inputdir (default: {appsettings.file_pattern})",
)

parser.add_argument(
    "--htmlAttribute",
    action="append",
    default=None,
    metavar="KEY=VALUE",
    help="Extra attribute for editor placeholder blocks (repeatable)",
)

parser.add_argument(
    "--show",
    action="store_true",
    default=False,
    help="Print converted output with syntax highlighting",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def htmlAttributes_parse(pairs: List[str]) -> Dict[str, str]:
    """
    Turn KEY=VALUE strings into an ordered dict

    Raises:
        ValueError: If an entry has no '=' or an empty key
    """
    attributes: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got '{pair}'")
        attributes[key.strip()] = value
    return attributes


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve input files.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputFiles: Files in inputdir matching filePattern
            - htmlAttributes: Settings attributes merged with --htmlAttribute
            - envOK: True if environment is valid

    Exits:
        1 if inputdir is missing, no file matches, or an attribute is malformed
    """

    state = inputstate.copy()
    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    pattern = state.filePattern or appsettings.file_pattern
    state.inputFiles = sorted(p for p in state.inputdir.glob(pattern) if p.is_file())
    if not state.inputFiles:
        print(f"Error: No files matching '{pattern}' in {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Matched {len(state.inputFiles)} files with '{pattern}'", level=2)

    try:
        state.htmlAttributes = appsettings.htmlAttributes_merge(
            htmlAttributes_parse(state.htmlAttribute)
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def files_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert every matched file in the requested direction.

    Args:
        inputstate: Program state with inputFiles resolved

    Returns:
        ProgramState with added field:
            - conversionResult: Dict containing status, output_files,
              file_count and macro_count

    Exits:
        1 if a file holds a malformed macro tag or conversion fails
    """

    state = inputstate.copy()
    LOG(f"Converting to {state.direction} format...", level=1)

    try:
        converter = Converter(
            files=state.inputFiles,
            input_dir=str(state.inputdir),
            output_dir=str(state.outputdir),
            direction=state.direction,
            html_attributes=state.htmlAttributes,
            verbosity=state.verbosity,
        )
        state.conversionResult = converter.convert()
        LOG(f"Converted {state.conversionResult['file_count']} files", level=2)
    except MacroTagError as e:
        print(f"Macro error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Conversion error: {e}", file=sys.stderr)
        if state.verbosity >= 3 or appsettings.debug_mode:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results (and the converted output with --show).

    Args:
        inputstate: Program state with conversionResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if conversionResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.conversionResult:
        print("Error: Conversion failed", file=sys.stderr)
        sys.exit(1)

    if state.show:
        for output_file in state.conversionResult['output_files']:
            print(f"── {output_file}")
            text = Path(output_file).read_text(encoding='utf-8')
            print(text if state.direction == "scan" else markup_highlight(text))

    LOG("\n✓ Conversion successful!", level=1)
    LOG(f"  Files:  {state.conversionResult['file_count']}", level=1)
    LOG(f"  Macros: {state.conversionResult['macro_count']}", level=1)
    LOG(f"  Output: {state.outputdir}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="macrotags - macro tag conversion",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert content files between macro formats.

    Orchestrates the conversion pipeline:
        1. env_check: Resolve input files and wrapper attributes
        2. files_convert: Convert each file
        3. results_report: Summarize (and optionally show) the output

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)
    pipeline(state, env_check, files_convert, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
