"""
Input loading for the ranking engine.

Reads already-fetched connection, policy and baseline exports (JSON arrays,
camelCase or snake_case keys) into validated models.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from src.state_rankings.models import Policy, PolicyConnection, StateBaselineWorkforce
from src.state_rankings.states import normalize_state_name

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class RankingInputs:
    """Materialized engine inputs."""
    connections: List[PolicyConnection] = field(default_factory=list)
    policies: List[Policy] = field(default_factory=list)
    baseline_data: List[StateBaselineWorkforce] = field(default_factory=list)


def load_records(path: str, model: Type[ModelT]) -> List[ModelT]:
    """
    Load a JSON array of records into models.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not hold a JSON array
        pydantic.ValidationError: If a record does not match the model
    """
    file_path = Path(path)
    if not file_path.exists():
        logger.error(f"Input file not found: {file_path}")
        raise FileNotFoundError(f"Input file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        logger.error(f"{file_path} does not contain a JSON array")
        raise ValueError(f"Expected a JSON array of records in {file_path}")

    records = TypeAdapter(List[model]).validate_python(data)
    logger.info(f"Loaded {len(records)} {model.__name__} records from {file_path}")
    return records


def load_inputs(
    connections_path: str,
    policies_path: str,
    baseline_path: Optional[str] = None,
) -> RankingInputs:
    """Load all engine inputs; baseline data is optional."""
    return RankingInputs(
        connections=load_records(connections_path, PolicyConnection),
        policies=load_records(policies_path, Policy),
        baseline_data=load_records(baseline_path, StateBaselineWorkforce) if baseline_path else [],
    )


def normalize_inputs(inputs: RankingInputs) -> RankingInputs:
    """Return copies of the inputs with state identifiers normalized to upper-case full names."""
    return RankingInputs(
        connections=[
            c.model_copy(update={"state_jurisdiction": normalize_state_name(c.state_jurisdiction)})
            if c.state_jurisdiction else c
            for c in inputs.connections
        ],
        policies=[
            p.model_copy(update={"jurisdiction": normalize_state_name(p.jurisdiction)})
            for p in inputs.policies
        ],
        baseline_data=[
            b.model_copy(update={"state_name": normalize_state_name(b.state_name)})
            for b in inputs.baseline_data
        ],
    )
