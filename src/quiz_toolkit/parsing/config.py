"""
Module: parsing.config

Purpose:
    Configuration dataclass for the CSV parser. Holds the defaults the
    exporting tool assumes (points, input box size, placeholder text) so
    they are passed explicitly into the assembler instead of living as
    literals in the row handlers.

Key Classes:
    - ParserConfig: Immutable parser settings

Used By:
    - parsing.assembler: Field defaults and placeholder text
    - loading.loader: Input size ceiling
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_INPUT_BYTES = 5 * 1024 * 1024  # 5 MiB


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for quiz CSV parsing (immutable).

    Attributes:
        default_points: Points for a new question and for unreadable
            ``Points`` cells (default 1)
        invalid_difficulty: Difficulty used when the ``Difficulty`` cell is
            not an integer (default 0)
        default_input_rows: Short-answer input rows (default 1)
        default_input_cols: Short-answer input columns (default 40)
        default_evaluation: Evaluation mode when the flag is unknown
        placeholder_choice_template: Choice text used when a ``Match`` row
            references an unseen choice number. Must contain ``{choice_no}``.
        html_marker: Cell value that marks a text field as markup
            (compared case-insensitively)
        max_input_bytes: Upload size ceiling enforced by the loader

    Example:
        >>> config = ParserConfig(default_input_cols=60)
        >>> config.placeholder_for(3)
        '[Choice 3 Placeholder]'
    """

    default_points: int = 1
    invalid_difficulty: int = 0
    default_input_rows: int = 1
    default_input_cols: int = 40
    default_evaluation: str = "insensitive"
    placeholder_choice_template: str = "[Choice {choice_no} Placeholder]"
    html_marker: str = "html"
    max_input_bytes: int = DEFAULT_MAX_INPUT_BYTES

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.default_input_rows <= 0:
            raise ValueError(f"default_input_rows must be positive: {self.default_input_rows}")
        if self.default_input_cols <= 0:
            raise ValueError(f"default_input_cols must be positive: {self.default_input_cols}")
        if self.default_evaluation not in ("regexp", "sensitive", "insensitive"):
            raise ValueError(f"Invalid default_evaluation: {self.default_evaluation!r}")
        if "{choice_no}" not in self.placeholder_choice_template:
            raise ValueError(
                "placeholder_choice_template must contain '{choice_no}': "
                f"{self.placeholder_choice_template!r}"
            )
        if not self.html_marker:
            raise ValueError("html_marker must not be empty")
        if self.max_input_bytes <= 0:
            raise ValueError(f"max_input_bytes must be positive: {self.max_input_bytes}")

    def placeholder_for(self, choice_no: int) -> str:
        return self.placeholder_choice_template.format(choice_no=choice_no)
