"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing conversion stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the conversion pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, direction, filePattern,
                   htmlAttribute, show
        - env_check: inputFiles, htmlAttributes, envOK
        - files_convert: conversionResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing content files
        outputdir: Base output directory for converted files
        verbosity: Logging verbosity level (1-3)
        direction: Conversion direction ("editor", "persisted" or "scan")
        filePattern: Glob selecting input files (relative to inputdir)
        htmlAttribute: Raw KEY=VALUE strings from the command line
        show: Print converted output with syntax highlighting
        envOK: Environment validation passed
        inputFiles: Resolved input files matching filePattern
        htmlAttributes: Wrapper attributes (settings merged with CLI values)
        conversionResult: Converter results (status, output_files, counts)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    direction: str = field(default="editor")
    filePattern: str = field(default="")
    htmlAttribute: List[str] = field(default_factory=list)
    show: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputFiles: List[Path] = field(default_factory=list)
    htmlAttributes: Dict[str, str] = field(default_factory=dict)
    conversionResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (direction, filePattern, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for conversion output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Drop options that are not state fields (and unset ones, keeping defaults)
        filtered_options = {
            k: v for k, v in options_dict.items() if k in valid_fields and v is not None
        }

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
            files_convert,
            results_report
        )

    This is equivalent to:
        results_report(files_convert(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
