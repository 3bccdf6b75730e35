"""
Program and formatter state models, and the pipeline helper

Defines ProgramState for the functional CLI pipeline, FormatterState for a
single document formatting pass, and the pipeline() helper for composing
transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field

from .directives import Modifier


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class FormatterState:
    """
    Formatting state owned by exactly one document pass

    Created fresh at the start of each document and discarded when it ends.
    Never share an instance between passes.

    Attributes:
        current_modifier: Most recently opened, not yet closed style tag
        line_budget_used: Weight units consumed since the last line break
    """
    current_modifier: Modifier = field(default=Modifier.NONE)
    line_budget_used: int = field(default=0)

    def budget_reset(self) -> None:
        self.line_budget_used = 0


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    Each stage receives a copy of the previous state and adds its fields.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile, ansi
        - env_check: inputSourceFile, renderOutputFile, envOK
        - source_read: sourceText
        - document_render: directives, renderResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source markup file
        outputdir: Directory for the rendered output
        verbosity: Logging verbosity level (1-3)
        inputFile: Input markup filename (relative to inputdir)
        outputFile: Output filename (relative to outputdir), settings default if empty
        ansi: Style rendered text with ANSI escape sequences
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the input file
        renderOutputFile: Resolved path to the output file
        sourceText: Raw markup read from the input file
        directives: Print directives produced by the formatter
        renderResult: Render results (output_file, directive_count, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: str = field(default="")
    ansi: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    renderOutputFile: Path = field(default=Path("/"))
    sourceText: Optional[str] = field(default=None)
    directives: Optional[List[Any]] = field(default=None)  # List[PrintDirective] at runtime
    renderResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Namespace may carry options ProgramState does not know about
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            document_render,
            results_report
        )

    This is equivalent to:
        results_report(document_render(source_read(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
