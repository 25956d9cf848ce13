"""Console-driven menu loop for running the graded exercises."""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from exercheck.core.rng import RNG
from exercheck.data.repositories import CombatantsRepository
from exercheck.domain import fight
from exercheck.services import (
    LearnerImportError,
    build_reference_roster,
    collect,
    grade_scenario,
    learner_target_from_env,
    load_fight_fn,
    markers_for_style,
    summarize,
)
from exercheck.presentation.cli.config import ConfigValue, load_config, save_config
from exercheck.presentation.cli.render import (
    debug_enabled,
    render_heading,
    render_menu,
    render_report,
    render_summary,
)

_MAX_RANDOM_SEED = 2**31 - 1


@dataclass(slots=True)
class _Citizen:
    """Sample spyable used by the PRISM collection demo."""

    name: str
    phone: str

    @property
    def personal_information(self) -> str:
        return f"{self.name}, phone {self.phone}"

    def send_info_to_nsa(self) -> None:
        return None


@dataclass(slots=True)
class _Device:
    owner: str
    model: str

    @property
    def personal_information(self) -> str:
        return f"{self.owner}'s {self.model} location history"

    def send_info_to_nsa(self) -> None:
        return None


_DEMO_SPYABLES = (
    _Citizen(name="Alice", phone="555-0100"),
    _Device(owner="Bob", model="smart fridge"),
    _Citizen(name="Carol", phone="555-0199"),
)


def main(config_path: Path | None = None) -> None:
    """Start the interactive CLI session."""
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    config = load_config(config_path)
    combatants_repo = CombatantsRepository()
    print("=== Exercise Checker ===")
    while True:
        actions = _main_menu_options(combatants_repo, config, config_path)
        render_menu("Main Menu", [label for label, _ in actions])
        index = _prompt_choice(len(actions))
        keep_running = actions[index][1]()
        if not keep_running:
            break
    print("Goodbye!")


def _main_menu_options(
    combatants_repo: CombatantsRepository,
    config: Dict[str, ConfigValue],
    config_path: Path | None,
) -> List[Tuple[str, Callable[[], bool]]]:
    return [
        ("Run Lightsaber Scenario", lambda: _run_lightsaber_scenario(combatants_repo, config)),
        ("Run PRISM Collection", lambda: _run_prism_collection(_DEMO_SPYABLES)),
        ("Options", lambda: _options_menu(config, config_path)),
        ("Quit", lambda: False),
    ]


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _run_lightsaber_scenario(combatants_repo: CombatantsRepository, config: Dict[str, ConfigValue]) -> bool:
    target = learner_target_from_env()
    fight_fn = fight
    if target is not None:
        try:
            fight_fn = load_fight_fn(target)
        except LearnerImportError as exc:
            print(f"Cannot grade {target}: {exc}")
            return True
    seed = _prompt_seed()
    roster = build_reference_roster(combatants_repo, RNG(seed))
    markers = markers_for_style(str(config["marker_style"]))
    results = grade_scenario(roster, fight_fn=fight_fn, report_final_check=bool(config["report_final_check"]))
    render_report(f"Lightsaber Scenario (seed {seed})", [result.render(markers) for result in results])
    if target is not None:
        print(f"Graded: {target}")
    render_summary(*summarize(results))
    return True


def _run_prism_collection(spyables: Sequence[object]) -> bool:
    render_report("PRISM", collect(spyables))
    return True


def _options_menu(config: Dict[str, ConfigValue], config_path: Path | None) -> bool:
    while True:
        final_state = "on" if config["report_final_check"] else "off"
        render_menu(
            "Options",
            [
                f"Marker style: {config['marker_style']}",
                f"Report final check: {final_state}",
                "Back",
            ],
        )
        index = _prompt_choice(3)
        if index == 0:
            config["marker_style"] = "ascii" if config["marker_style"] == "emoji" else "emoji"
        elif index == 1:
            config["report_final_check"] = not config["report_final_check"]
        else:
            return True
        save_config(config, config_path)
        render_heading("Options saved")
