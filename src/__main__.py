#!/usr/bin/env python3
"""
mwprefix - Utility-class namespace codemod

Rewrites utility-class tokens in JavaScript, TypeScript, JSX/TSX and HTML
sources so that recognized class names carry a namespace prefix, letting two
utility vocabularies live side by side on one page.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Philosophy:
    - Conservative: only a closed vocabulary of utility stems is rewritten;
      every other token passes through byte for byte
    - Stable: already-prefixed classes are never prefixed again, so runs are
      repeatable
    - Local: only string literal bodies change; comments, templates and
      formatting are untouched

Usage:
    mwprefix inputdir/ outputdir/ [--prefix mw-] [--pattern 'src/**/*.tsx']

    Every supported file under inputdir that matches the pattern is written,
    rewritten, to the same relative path under outputdir. Passing the same
    directory twice rewrites in place.

Examples:
    # Rewrite a source tree into a copy
    mwprefix web/ web-prefixed/

    # In place, custom prefix, class attributes only
    mwprefix web/ web/ --prefix tw- --attributesOnly

    # Verbose output, one line per rewritten literal
    mwprefix web/ out/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import Any, Dict, List

from chris_plugin import chris_plugin
from . import __version__
from .config import appsettings
from .lib import source_transform, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  mw-[ prefix ]

  Utility-class namespace codemod
"""

# Define CLI arguments
parser = ArgumentParser(
    description="mwprefix - prefix utility classes in JS/TS/JSX/HTML sources",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--prefix",
    default=appsettings.default_prefix,
    type=str,
    help="Namespace prefix inserted before recognized utility stems",
)

parser.add_argument(
    "--pattern",
    default=appsettings.default_pattern,
    type=str,
    help="Glob (relative to inputdir) selecting files to rewrite",
)

parser.add_argument(
    "--attributesOnly",
    default=False,
    action="store_true",
    help="Only rewrite class/className attributes, not every string literal",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve defaults.

    Verifies that the input directory exists, creates the output directory,
    and fills in the configured prefix and pattern when none were given.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with prefix/pattern resolved and envOK set

    Exits:
        1 if the input directory does not exist
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    if state.outputdir is None:
        state.outputdir = state.inputdir
    state.outputdir.mkdir(parents=True, exist_ok=True)

    state.prefix = state.prefix or appsettings.default_prefix
    state.pattern = state.pattern or appsettings.default_pattern

    LOG(f"Input directory: {state.inputdir}", level=2)
    LOG(f"Output directory: {state.outputdir}", level=2)
    LOG(f"Prefix: '{state.prefix}'  Pattern: '{state.pattern}'", level=2)

    state.envOK = True
    return state


def sources_find(inputstate: ProgramState) -> ProgramState:
    """
    Collect the supported source files under the input directory.

    Files must match the glob pattern, have an extension from one of the
    configured grammars, and not sit below a skipped directory.

    Args:
        inputstate: Program state with inputdir and pattern resolved

    Returns:
        ProgramState with added field:
            - sourceFiles: sorted list of file paths
    """
    state = inputstate.copy()

    LOG("Finding source files...", level=1)

    skip = set(appsettings.skip_dirs)
    found: List[Path] = []
    for candidate in state.inputdir.glob(state.pattern):
        relative = candidate.relative_to(state.inputdir)
        if skip.intersection(relative.parts[:-1]):
            continue
        if candidate.is_file() and appsettings.path_isSupported(candidate.name):
            found.append(candidate)

    state.sourceFiles = sorted(found)
    LOG(f"Found {len(state.sourceFiles)} source files", level=2)
    return state


def sources_transform(inputstate: ProgramState) -> ProgramState:
    """
    Rewrite each source file into the output directory.

    Files that cannot be read or decoded are reported and skipped. When
    rewriting in place, unchanged files are not written back.

    Args:
        inputstate: Program state with sourceFiles

    Returns:
        ProgramState with added field:
            - transformResults: list of dicts with keys
              path, grammar, literals_changed

    Exits:
        1 on an unexpected error while transforming a file
    """
    state = inputstate.copy()

    LOG("Rewriting class lists...", level=1)

    in_place = state.outputdir.resolve() == state.inputdir.resolve()
    results: List[Dict[str, Any]] = []

    for source_file in state.sourceFiles:
        relative = source_file.relative_to(state.inputdir)

        try:
            source = source_file.read_text(encoding=appsettings.file_encoding)
        except (OSError, UnicodeDecodeError) as e:
            LOG(f"Warning: skipping {relative}: {e}", level=1)
            continue

        try:
            result = source_transform(
                source,
                path=source_file.name,
                prefix=state.prefix,
                attributes_only=state.attributesOnly,
            )
        except Exception as e:
            print(f"Transform error in {relative}: {e}", file=sys.stderr)
            if state.verbosity >= 3:
                import traceback

                traceback.print_exc()
            sys.exit(1)

        if not (in_place and not result.changed):
            target = state.outputdir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(result.output, encoding=appsettings.file_encoding)

        LOG(f"{relative}: {result.literals_changed} literals changed", level=2)
        results.append(
            {
                "path": str(relative),
                "grammar": result.grammar.value,
                "literals_changed": result.literals_changed,
            }
        )

    state.transformResults = results
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the run.

    Args:
        inputstate: Program state with transformResults populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if transformResults is None
    """
    state: ProgramState = inputstate.copy()
    if state.transformResults is None:
        print("Error: No files were transformed", file=sys.stderr)
        sys.exit(1)

    changed = [r for r in state.transformResults if r["literals_changed"]]
    literals = sum(r["literals_changed"] for r in state.transformResults)

    LOG("\n✓ Rewrite complete", level=1)
    LOG(f"  Files scanned: {len(state.transformResults)}", level=1)
    LOG(f"  Files changed: {len(changed)}", level=1)
    LOG(f"  Literals changed: {literals}", level=1)
    LOG(f"  Output: {state.outputdir}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="mwprefix - utility-class namespace codemod",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - prefix utility classes in every source under inputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths and resolve defaults
        2. sources_find: Collect supported files
        3. sources_transform: Rewrite each file into outputdir
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - prefix: str - Namespace prefix
            - pattern: str - Glob selecting files
            - attributesOnly: bool - Restrict rewriting to class attributes
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing source files
        outputdir: Directory where rewritten files are written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, sources_find, sources_transform, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
