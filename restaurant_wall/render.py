"""Plain-text renderers for the restaurant list and map."""

from restaurant_wall.models import AppState, Restaurant, ViewMode

TITLE = "Restaurant Wall"
HEADLINE = "Find a Vegan Restaurant near you"
TAGLINE = "Add any restaurant suggestions that you have"
LOADING_MESSAGE = "Loading restaurants..."
NO_RESTAURANTS_MESSAGE = "No restaurants added yet. Be the first to recommend one!"
NO_MATCHES_MESSAGE = "No restaurants match your filters."


def format_rating(rating: int) -> str:
    """Render a 1-5 rating as stars."""
    return "★" * rating + "☆" * (5 - rating)


def format_card(restaurant: Restaurant, selected: bool = False) -> str:
    """Render one restaurant as a multi-line card."""
    marker = ">" if selected else " "
    added = restaurant.created_at.strftime("%Y-%m-%d")
    return "\n".join(
        [
            f"{marker} {restaurant.name}  [{restaurant.id[:8]}]",
            f"    {restaurant.cuisine.value} · {restaurant.price_range.value} · "
            f"{format_rating(restaurant.rating)}",
            f"    {restaurant.description}",
            f"    {restaurant.location.address}",
            f"    Recommended by {restaurant.recommended_by} on {added}",
        ]
    )


def format_list(
    restaurants: list[Restaurant],
    selected_id: str | None,
    total: int,
) -> str:
    """Render the cards, or an explanation when there are none.

    Args:
        restaurants: Restaurants to show, already filtered and sorted
        selected_id: Id of the highlighted restaurant
        total: Size of the unfiltered collection
    """
    if not restaurants:
        return NO_RESTAURANTS_MESSAGE if total == 0 else NO_MATCHES_MESSAGE
    return "\n\n".join(format_card(r, r.id == selected_id) for r in restaurants)


def format_map(restaurants: list[Restaurant], selected_id: str | None) -> str:
    """Render restaurants as numbered map markers with coordinates."""
    if not restaurants:
        return "Map: no markers"

    lines = ["Map:"]
    for number, restaurant in enumerate(restaurants, start=1):
        marker = "*" if restaurant.id == selected_id else " "
        lines.append(
            f" {marker}{number:>3}. ({restaurant.location.latitude:.5f}, "
            f"{restaurant.location.longitude:.5f}) {restaurant.name}"
        )
    return "\n".join(lines)


def render(state: AppState, restaurants: list[Restaurant]) -> str:
    """Render the page body for the current view mode.

    Args:
        state: Current application state
        restaurants: Output of the filter/sort pipeline for that state
    """
    sections = []
    if state.error:
        sections.append(f"! {state.error}")

    if state.is_loading:
        sections.append(LOADING_MESSAGE)
        return "\n\n".join(sections)

    if state.view_mode in (ViewMode.LIST, ViewMode.BOTH):
        sections.append(
            format_list(restaurants, state.selected_restaurant, len(state.restaurants))
        )
    if state.view_mode in (ViewMode.MAP, ViewMode.BOTH):
        sections.append(format_map(restaurants, state.selected_restaurant))

    return "\n\n".join(sections)
