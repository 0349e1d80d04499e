"""Print a video prompt for a JSON configuration file.

Standalone helper for trying out configurations without running the API.

Usage:
    # from the project root
    uv run python scripts/generate_prompt.py config.json
    uv run python scripts/generate_prompt.py config.json --variations 3
    uv run python scripts/generate_prompt.py config.json --preview
    uv run python scripts/generate_prompt.py config.json --seed 42
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Make backend/ importable when run as a plain script
_BACKEND_PATH = Path(__file__).parent.parent / "backend"
if str(_BACKEND_PATH) not in sys.path:
    sys.path.insert(0, str(_BACKEND_PATH))

import random  # noqa: E402

from vidprompt.models.prompt import PromptConfig  # noqa: E402
from vidprompt.services.assembler import PromptAssembler  # noqa: E402


def load_config(path: Path) -> PromptConfig:
    """Read and validate a PromptConfig from a JSON file.

    Raises:
        pydantic.ValidationError: The file does not describe a valid config.
    """
    return PromptConfig.model_validate_json(Path(path).read_text(encoding="utf-8"))


def render(
    config: PromptConfig,
    variations: int = 0,
    preview: bool = False,
    seed: Optional[int] = None,
) -> list[str]:
    """Produce the prompt text(s) requested on the command line."""
    assembler = PromptAssembler(rng=random.Random(seed))
    if preview:
        return [assembler.preview(config)]
    if variations > 0:
        return assembler.variations(config, variations)
    return [assembler.assemble(config)]


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a video prompt from a JSON config")
    parser.add_argument("config", type=Path, help="Path to a PromptConfig JSON file")
    parser.add_argument(
        "--variations",
        type=int,
        default=0,
        help="Print this many complexity re-rolls instead of a single prompt",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Deterministic preview using the first fragment of every table",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    for index, text in enumerate(render(config, args.variations, args.preview, args.seed)):
        if index:
            print()
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
