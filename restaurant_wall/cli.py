"""Command-line interface for Restaurant Wall."""

import asyncio
import logging
import sys
from collections.abc import Callable

from pydantic import ValidationError

from restaurant_wall.app import RestaurantWall
from restaurant_wall.config import get_config, setup_logging
from restaurant_wall.models import (
    CUISINE_FILTER_ALL,
    PRICE_FILTER_ALL,
    Cuisine,
    PriceRange,
    RestaurantDraft,
    SortKey,
    ViewMode,
)
from restaurant_wall.render import HEADLINE, TAGLINE, TITLE, render
from restaurant_wall.store import (
    select_restaurant,
    set_cuisine_filter,
    set_price_filter,
    set_search_term,
    set_sort,
    set_view_mode,
)

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  list                      Show restaurants
  refresh                   Reload restaurants from the API
  add                       Recommend a new restaurant
  search [text]             Search names and descriptions (no text clears it)
  cuisine <name|all>        Filter by cuisine
  price <€..€€€€|1-4|all>   Filter by price
  sort <key>                newest, oldest, rating, price-asc, price-desc
  select <id|none>          Highlight a restaurant (id prefix is enough)
  view <list|map|both>      Choose which panels to show
  help                      Show this help
  quit                      Exit"""


def parse_cuisine(value: str) -> str:
    """Map user input to a cuisine filter value (case-insensitive).

    Raises:
        ValueError: If the cuisine is unknown
    """
    if value.lower() == CUISINE_FILTER_ALL.lower():
        return CUISINE_FILTER_ALL
    for cuisine in Cuisine:
        if cuisine.value.lower() == value.lower():
            return cuisine.value
    choices = ", ".join(c.value for c in Cuisine)
    msg = f"Unknown cuisine '{value}'. Choose one of: All, {choices}"
    raise ValueError(msg)


def parse_price(value: str) -> str:
    """Map user input (symbols, a 1-4 tier or "all") to a price filter value.

    Raises:
        ValueError: If the value is not a known price range
    """
    value = value.strip()
    if value.lower() == PRICE_FILTER_ALL:
        return PRICE_FILTER_ALL
    if value.isdigit():
        return PriceRange.from_tier(int(value)).value
    return PriceRange(value).value


def parse_sort(value: str) -> str:
    """Validate a sort key.

    Raises:
        ValueError: If the key is unknown
    """
    return SortKey(value.lower()).value


def read_draft(ask: Callable[[str], str]) -> RestaurantDraft:
    """Collect a new recommendation field by field.

    Args:
        ask: Function that shows a prompt and returns the user's answer

    Raises:
        ValueError: If an answer cannot be used (includes ValidationError)
    """
    name = ask("Name: ").strip()
    cuisine = parse_cuisine(ask("Cuisine: ").strip())
    if cuisine == CUISINE_FILTER_ALL:
        msg = "Pick a specific cuisine"
        raise ValueError(msg)
    description = ask("Description: ").strip()
    price_range = parse_price(ask("Price (€ to €€€€, or 1-4): "))
    if price_range == PRICE_FILTER_ALL:
        msg = "Pick a specific price range"
        raise ValueError(msg)

    return RestaurantDraft.model_validate(
        {
            "name": name,
            "cuisine": cuisine,
            "description": description,
            "priceRange": price_range,
            "rating": ask("Rating (1-5): ").strip(),
            "recommendedBy": ask("Recommended by: ").strip(),
            "location": {
                "address": ask("Address: ").strip(),
                "lat": ask("Latitude: ").strip(),
                "lng": ask("Longitude: ").strip(),
            },
        }
    )


class RestaurantWallCLI:
    """Interactive terminal front end for Restaurant Wall."""

    def __init__(self, app: RestaurantWall | None = None) -> None:
        """Initialize the CLI.

        Args:
            app: Application to drive (created from the global config if omitted)
        """
        self.config = app.config if app else get_config()
        setup_logging(self.config)
        self.app = app or RestaurantWall(self.config)
        logger.info("Restaurant Wall CLI initialized")

    def _display_header(self) -> None:
        print("\n" + "=" * 60)
        print(TITLE)
        print("\n" + HEADLINE)
        print(TAGLINE)
        print("\n" + "=" * 60 + "\n")

    def show(self) -> None:
        """Print the current page."""
        print(render(self.app.state, self.app.visible()))

    def run(self) -> None:
        """Run the CLI application."""
        self._display_header()
        asyncio.run(self.app.load())
        self.show()
        print("\nType 'help' for commands, 'quit' to exit.")

        while True:
            try:
                user_input = input("\n> ").strip()

                if not user_input:
                    continue

                if user_input.lower() in ["quit", "exit", "q"]:
                    print("\nGoodbye!")
                    break

                self.handle(user_input)

            except KeyboardInterrupt:
                print("\n\nGoodbye!")
                break
            except EOFError:
                break
            except Exception as e:
                logger.error(f"Unexpected error: {e}", exc_info=True)
                print(f"\n⚠ An unexpected error occurred: {e}")

    def handle(self, user_input: str) -> None:
        """Run a single command.

        Args:
            user_input: Command line typed by the user
        """
        command, _, argument = user_input.partition(" ")
        command = command.lower()
        argument = argument.strip()

        try:
            if command == "help":
                print(HELP_TEXT)
                return
            if command == "list":
                pass
            elif command == "refresh":
                asyncio.run(self.app.load())
            elif command == "add":
                self._add()
            elif command == "search":
                self.app.update(set_search_term, argument)
            elif command == "cuisine":
                self.app.update(set_cuisine_filter, parse_cuisine(argument))
            elif command == "price":
                self.app.update(set_price_filter, parse_price(argument))
            elif command == "sort":
                self.app.update(set_sort, parse_sort(argument))
            elif command == "select":
                self._select(argument)
            elif command == "view":
                self.app.update(set_view_mode, ViewMode(argument.lower()))
            else:
                print(f"Unknown command '{command}'. Type 'help' for commands.")
                return
        except ValueError as e:
            print(f"⚠ {e}")
            return

        self.show()

    def _add(self) -> None:
        try:
            draft = read_draft(input)
        except ValidationError as e:
            print("⚠ Restaurant not added:")
            for error in e.errors():
                field = ".".join(str(part) for part in error["loc"])
                print(f"  {field}: {error['msg']}")
            return

        if asyncio.run(self.app.add(draft)):
            print(f"\n✓ Added {draft.name}")

    def _select(self, argument: str) -> None:
        if not argument or argument.lower() == "none":
            self.app.update(select_restaurant, None)
            return

        matches = [r for r in self.app.state.restaurants if r.id.startswith(argument)]
        if len(matches) != 1:
            msg = f"No single restaurant matches id '{argument}'"
            raise ValueError(msg)
        self.app.update(select_restaurant, matches[0].id)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        get_config()
    except Exception as e:
        print(f"Configuration error: {e}")
        print("\nSet API_URL to point at the restaurants API, for example:")
        print("  API_URL=http://localhost:3000/api")
        sys.exit(1)

    cli = RestaurantWallCLI()
    cli.run()


if __name__ == "__main__":
    main()
