"""
Build Track Step Definitions

Loads the ordered build steps from build_steps.yaml (or FOLIO_BUILD_STEPS_PATH).
Routes are derived from slugs: step "01-problem" lives at /rb/01-problem.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
BUILD_STEPS_PATH = Path(
    os.getenv("FOLIO_BUILD_STEPS_PATH", Path(__file__).parent / "build_steps.yaml")
)

ROUTE_PREFIX = "/rb"


@dataclass(frozen=True)
class BuildStep:
    """
    One gated step of the build track.

    Attributes:
        index: 1-based position; step N opens once step N-1 has an artifact
        slug: URL-safe identifier (e.g., "01-problem")
        route: Route of the step page (e.g., "/rb/01-problem")
        title: Display title
        prompt: What the artifact for this step should contain
    """

    index: int
    slug: str
    route: str
    title: str
    prompt: str


def load_build_track(config_path: Path = None) -> Tuple[List[BuildStep], str]:
    """
    Load build steps and the proof route from YAML.

    Args:
        config_path: Optional path to the steps file (defaults to BUILD_STEPS_PATH)

    Returns:
        (steps sorted by index, proof route)

    Raises:
        ValueError: If step indexes are not exactly 1..N
    """
    if config_path is None:
        config_path = BUILD_STEPS_PATH

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    steps = [
        BuildStep(
            index=int(step["index"]),
            slug=step["slug"],
            route=step.get("route") or f"{ROUTE_PREFIX}/{step['slug']}",
            title=step["title"],
            prompt=step["prompt"],
        )
        for step in config["steps"]
    ]
    steps.sort(key=lambda step: step.index)

    expected = list(range(1, len(steps) + 1))
    if [step.index for step in steps] != expected:
        raise ValueError(
            f"Build step indexes must be 1..{len(steps)} in {config_path}, "
            f"got {[step.index for step in steps]}"
        )

    proof_route = config.get("proof_route") or f"{ROUTE_PREFIX}/proof"
    return steps, proof_route


BUILD_STEPS, PROOF_ROUTE = load_build_track()
