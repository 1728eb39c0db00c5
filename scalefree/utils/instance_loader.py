"""
Save and load generated graph instances as JSON files.

Supports single-instance and batch (list of instances) JSON files.
Each instance must have at minimum ``nodes`` and ``edges`` keys.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Union

logger = logging.getLogger(__name__)


def save_instances(
    instances: Union[dict[str, Any], list[dict[str, Any]]],
    path: str,
) -> str:
    """
    Write graph instances to a JSON file as an array.

    Parent directories are created as needed.

    Parameters
    ----------
    instances : dict | list[dict]
        A single instance dict or a list of them.
    path : str
        Destination file.

    Returns
    -------
    str
        The path written.
    """
    if isinstance(instances, dict):
        instances = [instances]

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w") as f:
        json.dump(instances, f, indent=2)

    logger.info("Wrote %d instances to %s", len(instances), path)
    return path


def load_instances(path: str) -> list[dict[str, Any]]:
    """
    Load graph instances from a JSON file.

    The file may contain either:
    - A single instance dict (with ``nodes`` and ``edges``)
    - A list of instance dicts

    Parameters
    ----------
    path : str
        Path to the JSON file.

    Returns
    -------
    list[dict]
        List of validated graph instance dicts.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    ValueError
        If the JSON structure is invalid or an edge names an unlisted node.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Instance file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    # Normalize to list
    if isinstance(data, dict):
        instances = [data]
    elif isinstance(data, list):
        instances = data
    else:
        raise ValueError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )

    validated = []
    for i, inst in enumerate(instances):
        if not isinstance(inst, dict):
            raise ValueError(f"Instance {i} is not a dict: {type(inst).__name__}")

        for key in ("nodes", "edges"):
            if key not in inst:
                raise ValueError(
                    f"Instance {i} missing required '{key}' key. "
                    f"Expected format: {{\"nodes\": [...], \"edges\": [...]}}"
                )

        _check_edges(i, inst)

        if "metadata" not in inst:
            inst["metadata"] = {
                "generator": "custom",
                "size": len(inst["nodes"]),
                "params": {},
            }

        if "instance_name" not in inst:
            inst["instance_name"] = f"custom_{i}"

        validated.append(inst)

    return validated


def _check_edges(index: int, inst: dict[str, Any]) -> None:
    """Every edge must join two distinct listed nodes."""
    nodes = set(inst["nodes"])
    for k, edge in enumerate(inst["edges"]):
        if not isinstance(edge, dict) or "source" not in edge or "target" not in edge:
            raise ValueError(
                f"Instance {index} edge {k} needs 'source' and 'target' keys"
            )
        for endpoint in (edge["source"], edge["target"]):
            if endpoint not in nodes:
                raise ValueError(
                    f"Instance {index} edge {k} references unknown node {endpoint!r}"
                )
        if edge["source"] == edge["target"]:
            raise ValueError(f"Instance {index} edge {k} is a self-loop")
