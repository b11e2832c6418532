"""
JSON loaders for the command line.

Reads already-exported candidate, employer, exclusion and profile records
and validates them into models. The engine itself never touches files.
"""

import json
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from src.utils.constants import SUPPORTED_INPUT_FORMATS
from src.utils.logger import get_logger

from .models import Candidate, CandidateExclusion, Employer, EmployerProfile

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class InputFileError(Exception):
    """Raised when an input file cannot be read or does not hold valid records."""


def _read_json(path: Path):
    if path.suffix.lower() not in SUPPORTED_INPUT_FORMATS:
        raise InputFileError(f"Unsupported file type: {path.suffix or path.name}")
    try:
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as e:
        raise InputFileError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputFileError(f"Invalid JSON in {path}: {e}") from e


def _load_list(path: Path, model: type[ModelT]) -> list[ModelT]:
    data = _read_json(path)
    # A single object is accepted as a one-record list
    if isinstance(data, dict):
        data = [data]
    try:
        records = TypeAdapter(list[model]).validate_python(data)
    except ValidationError as e:
        raise InputFileError(f"Invalid {model.__name__} records in {path}:\n{e}") from e
    logger.debug(f"Loaded {len(records)} {model.__name__} records from {path}")
    return records


def load_candidates(path: Path) -> list[Candidate]:
    """Load a list of candidates."""
    return _load_list(path, Candidate)


def load_employer(path: Path) -> Employer:
    """Load one employer job posting."""
    data = _read_json(path)
    try:
        return Employer.model_validate(data)
    except ValidationError as e:
        raise InputFileError(f"Invalid Employer record in {path}:\n{e}") from e


def load_exclusions(path: Path) -> list[CandidateExclusion]:
    """Load candidate exclusion records."""
    return _load_list(path, CandidateExclusion)


def load_profiles(path: Path) -> list[EmployerProfile]:
    """Load employer profiles."""
    return _load_list(path, EmployerProfile)


def find_profile(profiles: list[EmployerProfile], employer_name: str) -> Optional[EmployerProfile]:
    """Pick the profile whose employer name matches, case-insensitively."""
    wanted = employer_name.strip().lower()
    for profile in profiles:
        if profile.employer_name.strip().lower() == wanted:
            return profile
    return None
