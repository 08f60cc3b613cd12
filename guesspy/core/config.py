"""Configuration management for GuessPy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from multiprocessing import cpu_count

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from guesspy.core.types import MatchPolicy, PhoneticAlgorithm
from guesspy.utils import expand_file_path


class Config(BaseModel):
    """Configuration for the guess matcher command line tool."""

    # Matching policy
    chars_per_edit: int = Field(4, ge=1, description="Word length that earns one allowed edit")
    min_edits: int = Field(1, ge=1, description="Edits always tolerated for non-empty words")
    allow_transpositions: bool = Field(True, description="Adjacent swaps count as one edit")
    phonetic: list[PhoneticAlgorithm] = Field(
        default_factory=lambda: ["metaphone"], description="Phonetic encoders to compare"
    )
    variants: str | None = Field(None, description="File with extra variant groups")

    # Runs
    cases: str | None = Field(None, description="YAML file of match cases to check")
    audit: bool = Field(False, description="Audit common words for false positives")
    top_n: int = Field(1000, ge=2, description="Number of common words to audit")
    min_word_length: int = Field(3, ge=1, description="Shortest word included in an audit")
    output: str | None = None

    # Logging and workers
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None
    jobs: int = Field(default_factory=cpu_count, ge=1)

    @field_validator("phonetic", mode="before")
    @classmethod
    def parse_phonetic(cls, v):
        """Parse comma-separated string or list into a de-duplicated list."""
        if v is None or v == "":
            return ["metaphone"]
        if isinstance(v, str):
            v = v.split(",")
        return list(dict.fromkeys(s.strip().lower() for s in v if s.strip()))

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.output and not self.audit:
            raise ValueError("output is only used with audit")
        return self

    def match_policy(self) -> MatchPolicy:
        """Return the matching policy described by this configuration."""
        return MatchPolicy(
            chars_per_edit=self.chars_per_edit,
            min_edits=self.min_edits,
            allow_transpositions=self.allow_transpositions,
            phonetic_algorithms=tuple(self.phonetic),
        )


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please check the JSON syntax")
            raise

    config_dict = {
        "chars_per_edit": get_value("chars_per_edit", 4),
        "min_edits": get_value("min_edits", 1),
        "allow_transpositions": not cli_args.no_transpositions
        and json_config.get("allow_transpositions", True),
        "phonetic": get_value("phonetic", None),
        "variants": get_value("variants", None),
        "cases": get_value("cases", None),
        "audit": cli_args.audit or json_config.get("audit", False),
        "top_n": get_value("top_n", 1000),
        "min_word_length": get_value("min_word_length", 3),
        "output": get_value("output", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
        "jobs": get_value("jobs", cpu_count()),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
