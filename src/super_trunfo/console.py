# src/super_trunfo/console.py
import logging
import math

from .config import configure_logging
from .constants import Attribute, menu_entries, parse_attribute
from .exceptions import UnknownAttribute
from .match import MatchResult, evaluate_match
from .metrics import compute_derived
from .models import CityProfile

logger = logging.getLogger(__name__)

STATE_LETTERS = "ABCDEFGH"
DEFAULT_STATE = "A"
DEFAULT_CARD_CODE = "A01"


def _read_number(prompt: str, cast):
    """Prompts until the answer parses as a finite, non-negative number of the given type."""
    answer = input(prompt)
    while True:
        try:
            value = cast(answer.strip())
            valid = math.isfinite(value) and value >= 0
        except (ValueError, OverflowError):
            valid = False
        if valid:
            return value
        answer = input("Invalid value. Try again: ")


def read_int(prompt: str) -> int:
    return _read_number(prompt, int)


def read_float(prompt: str) -> float:
    return _read_number(prompt, float)


def read_state(prompt: str) -> str:
    while True:
        answer = input(prompt).strip().upper()
        if not answer:
            return DEFAULT_STATE
        if answer[0] in STATE_LETTERS:
            return answer[0]
        print("Invalid state. Use a letter from A to H.")


def read_card_code(prompt: str) -> str:
    parts = input(prompt).split()
    if not parts:
        return DEFAULT_CARD_CODE
    return parts[0][:4]


def read_profile(title: str) -> CityProfile:
    """
    Reads one city card from the terminal and computes its derived metrics.
    """
    print(f"\n=== {title} ===")
    profile = CityProfile(
        state_code=read_state(f"State ({STATE_LETTERS[0]}-{STATE_LETTERS[-1]}): "),
        card_code=read_card_code("Card code (e.g. A01): "),
        city_name=input("City name: ").strip()[:49],
        population=read_int("Population: "),
        area_km2=read_float("Area (km²): "),
        gdp_billions=read_float("GDP (in billions): "),
        tourist_points=read_int("Number of tourist points: "),
    )
    compute_derived(profile)
    return profile


def show_menu() -> None:
    print("\nAvailable attributes:")
    for number, label in menu_entries():
        print(f"{number} - {label}")


def read_distinct_attribute(prompt: str, different_from: Attribute = None) -> Attribute:
    """
    Prompts until the player picks a valid attribute that was not chosen before.
    """
    while True:
        answer = input(prompt).strip()
        try:
            attribute = parse_attribute(answer)
        except UnknownAttribute:
            print("Invalid attribute. Choose between 1 and 6.")
            continue
        if attribute == different_from:
            print("Attribute already chosen. Select another.")
            continue
        return attribute


def format_result(result: MatchResult) -> str:
    first = result.first.city_name
    second = result.second.city_name
    lines = [f"\nComparing {first} and {second}"]
    for index, comparison in enumerate(result.comparisons, start=1):
        lines.append(f"Attribute {index}: {comparison.name}")
        lines.append(f"  {first}: {comparison.first_value:.2f}")
        lines.append(f"  {second}: {comparison.second_value:.2f}")

    lines.append("\nFinal result (after attribute rules):")
    lines.append(f"{first}: {result.first_score:.4f}")
    lines.append(f"{second}: {result.second_score:.4f}")
    winner = result.winner
    lines.append(f"Winner: {winner.city_name if winner is not None else 'Tie!'}")
    return "\n".join(lines)


def print_result(result: MatchResult) -> None:
    print(format_result(result))


def main():
    """Runs one full match in the terminal."""
    configure_logging()
    first = read_profile("Card 1 registration")
    second = read_profile("Card 2 registration")

    show_menu()
    attr1 = read_distinct_attribute("Choose the first attribute to compare: ")
    attr2 = read_distinct_attribute("Choose the second attribute (different from the first): ", attr1)
    logger.debug("Selected attributes %s and %s", attr1.name, attr2.name)

    result = evaluate_match(first, second, attr1, attr2)
    print_result(result)
    return result


if __name__ == "__main__":
    main()
