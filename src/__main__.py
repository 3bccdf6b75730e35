#!/usr/bin/env python3
"""
htmlrender - Restricted HTML to text renderer

Reads one markup document written in a small HTML dialect, formats it into
print directives and writes the rendered text.

Supported tags:
    <html>, <body>      - document structure, ignored
    <p>                 - paragraph break
    <hr>, <br>          - horizontal rule, line break
    <b>, <i>, <pre>     - bold, italic, preformatted text
    <h1> ... <h6>       - headings
    <q>                 - quotation marks

Usage:
    htmlrender inputdir/ outputdir/ --inputFile page.html

Examples:
    # Basic render
    htmlrender . output/ --inputFile page.html

    # ANSI styled output to a chosen file
    htmlrender . output/ --inputFile page.html --outputFile page.txt --ansi

    # Token dump and per-token decisions
    htmlrender . output/ --inputFile page.html -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import Formatter, TextPrinter, tokenize, directives_render, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline
from .config import appsettings


# Define CLI arguments
parser = ArgumentParser(
    description="htmlrender - Render a restricted HTML dialect to text",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markup file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default="",
    type=str,
    help="Output text file (relative to outputdir). Defaults to HTMLRENDER_OUTPUT_FILE",
)

parser.add_argument(
    "--ansi",
    action="store_true",
    default=False,
    help="Style bold, italic and heading text with ANSI escapes",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markup file
            - renderOutputFile: Resolved path to the output file
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """

    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.renderOutputFile = state.outputdir / (state.outputFile or appsettings.output_file)
    LOG(f"Output file: {state.renderOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the markup file.

    Returns:
        ProgramState with added field:
            - sourceText: Raw markup

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def document_render(inputstate: ProgramState) -> ProgramState:
    """
    Tokenize, format and print the document to the output file.

    Returns:
        ProgramState with added fields:
            - directives: List[PrintDirective] from the formatter
            - renderResult: Dict containing:
                - status: bool
                - output_file: str
                - directive_count: int

    Exits:
        1 if the markup is malformed
    """

    state = inputstate.copy()

    LOG("Formatting document...", level=1)

    try:
        formatter = Formatter(tokenize(state.sourceText or ""), debug=(state.verbosity >= 3))
        state.directives = formatter.format()
    except SyntaxError as e:
        print(f"Markup error: {e}", file=sys.stderr)
        sys.exit(1)

    printer = TextPrinter(ansi=state.ansi or None)
    count = directives_render(state.directives, printer)
    state.renderOutputFile.write_text(printer.text(), encoding="utf-8")
    LOG(f"Wrote {state.renderOutputFile}", level=2)

    state.renderResult = {
        "status": True,
        "output_file": str(state.renderOutputFile),
        "directive_count": count,
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display render results.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Render failed", file=sys.stderr)
        sys.exit(1)

    LOG("✓ Render successful!", level=1)
    LOG(f"  Output: {state.renderResult['output_file']}", level=1)
    LOG(f"  Directives: {state.renderResult['directive_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="htmlrender - Restricted HTML to text renderer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render one markup document to text.

    Pipeline:
        1. env_check: Validate paths
        2. source_read: Read the markup file
        3. document_render: Tokenize, format and print to the output file
        4. results_report: Display results

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_read, document_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
