# src/cli/runner.py

"""Headless CLI commands: places, jobs, reviews, saved places and facets."""

import json
import logging
from typing import Any

from rich.console import Console
from rich.table import Table

from src.clients.api_client import ApiClient, ApiError
from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.filters.search_filter import SearchFilter
from src.models.catalog import DEMO_PRODUCTS
from src.models.job_post import JobPost
from src.models.place import Place, build_itinerary
from src.storage.saved_places import SavedPlacesStore, StorageError

logger = logging.getLogger("border_helper.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_json(records: list[dict[str, Any]]) -> None:
    print(json.dumps(records, ensure_ascii=False, indent=2))


def _print_places_table(places: list[Place], title: str) -> None:
    """Render a Rich table of places to stdout."""
    table = Table(title=title, show_lines=True, title_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", style="dim")
    table.add_column("Title", max_width=40)
    table.add_column("Type", style="magenta")
    table.add_column("Description", max_width=60, overflow="fold")

    for idx, p in enumerate(places, 1):
        table.add_row(
            str(idx), p.id, p.title, p.type or "—", p.description
        )

    Console().print(table)


def _print_jobs_table(posts: list[JobPost], kind: str) -> None:
    """Render a Rich table of job posts to stdout."""
    subtitle = "Company" if kind == "employer" else "Skill"
    table = Table(
        title="Job Posts" if kind == "employer" else "Job Seekers",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", max_width=40)
    table.add_column(subtitle, style="magenta")
    table.add_column("Location", style="green")

    for idx, post in enumerate(posts, 1):
        table.add_row(
            str(idx), post.title, post.subtitle, post.location or "—"
        )

    Console().print(table)


def run_places(
    query: str | None,
    place_type: str | None,
    output_format: str,
) -> int:
    """Fetch attractions, filter them and print the result."""
    client = ApiClient()
    try:
        places = client.get_attractions()
    except ApiError as exc:
        logger.error("Attraction fetch failed: %s", exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    search = SearchFilter.for_places()
    visible = search.compose_filters(places, query or "", place_type)
    if not visible:
        _err.print("[yellow]No places found.[/yellow]")
        return 1

    _err.print(f"[bold]{len(visible)}[/bold] of {len(places)} places")
    if output_format == "table":
        _print_places_table(visible, "Places to Visit")
    else:
        _print_json([p.to_dict() for p in visible])
    return 0


def run_jobs(
    query: str | None,
    kind: str,
    output_format: str,
) -> int:
    """Fetch job posts of one kind, filter them and print the result."""
    client = ApiClient()
    try:
        posts = client.get_job_posts(kind)
    except (ApiError, ValueError) as exc:
        logger.error("Job post fetch failed: %s", exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    search = SearchFilter.for_job_posts()
    visible = search.filter_by_query(posts, query or "")
    if not visible:
        _err.print("[yellow]No posts found.[/yellow]")
        return 1

    if output_format == "table":
        _print_jobs_table(visible, kind)
    else:
        _print_json([p.to_dict() for p in visible])
    return 0


def run_saved(
    action: str,
    place_id: str | None,
    place_type: str | None,
    store: SavedPlacesStore | None = None,
) -> int:
    """List, add or remove saved places."""
    store = store or SavedPlacesStore()
    try:
        if action == "list":
            places = store.list_places()
            search = SearchFilter.for_places()
            visible = search.filter_by_category(places, place_type)
            if not visible:
                _err.print("[yellow]No saved places yet.[/yellow]")
                return 0
            _print_places_table(visible, "Your Saved Places")
            return 0

        if not place_id:
            _err.print(f"[red]'{action}' needs a place id[/red]")
            return 1

        if action == "add":
            place = ApiClient().get_attraction(place_id)
            if place is None:
                _err.print(f"[red]Unknown place id: {place_id}[/red]")
                return 1
            if store.save_place(place):
                _err.print(f"[green]Saved {place.title}[/green]")
            else:
                _err.print(f"[dim]{place.title} is already saved[/dim]")
            return 0

        if action == "remove":
            if store.remove_place(place_id):
                _err.print(f"[green]Removed {place_id}[/green]")
            else:
                _err.print(f"[dim]{place_id} was not saved[/dim]")
            return 0
    except (ApiError, StorageError) as exc:
        logger.error("Saved places '%s' failed: %s", action, exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    _err.print(f"[red]Unknown action: {action}[/red]")
    return 1


def run_facets(collection: str) -> int:
    """Print the filter chips for places or products."""
    if collection == "products":
        products, _ = ProductValidator.validate(DEMO_PRODUCTS)
        facets = SearchFilter.for_products().derive_facet_list(products)
    else:
        try:
            places = ApiClient().get_attractions()
        except ApiError as exc:
            logger.error("Attraction fetch failed: %s", exc)
            _err.print(f"[red]Error: {exc}[/red]")
            return 1
        facets = SearchFilter.for_places().derive_facet_list(places)

    if not facets:
        _err.print("[yellow]Nothing to filter.[/yellow]")
        return 1
    print("\n".join(facets))
    return 0


def run_itinerary(name: str, output_format: str) -> int:
    """Print the places of a predefined trip in visiting order."""
    place_ids = Settings.ITINERARIES.get(name)
    if place_ids is None:
        valid = ", ".join(sorted(Settings.ITINERARIES))
        _err.print(f"[red]Unknown itinerary: {name}[/red]")
        _err.print(f"[dim]Available: {valid}[/dim]")
        return 1

    try:
        places = ApiClient().get_attractions()
    except ApiError as exc:
        logger.error("Attraction fetch failed: %s", exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    trip = build_itinerary(places, place_ids)
    if not trip:
        _err.print("[yellow]None of this trip's places are listed.[/yellow]")
        return 1

    if output_format == "table":
        _print_places_table(trip, f"{name} trip")
    else:
        _print_json([p.to_dict() for p in trip])
    return 0


def run_job_feed() -> int:
    """Print the raw job feed as JSON."""
    feed = ApiClient().get_all_jobs()
    if not feed:
        _err.print("[yellow]The job feed is empty or unavailable.[/yellow]")
        return 1
    _err.print(f"[bold]{len(feed)}[/bold] jobs in the feed")
    _print_json(feed)
    return 0


def run_review(
    post_id: str,
    rating: int,
    comment: str,
    reviewer_name: str,
) -> int:
    """Submit a review for a job post."""
    if not comment.strip():
        _err.print("[red]A review needs a comment.[/red]")
        return 1
    if not 1 <= rating <= 5:
        _err.print(f"[red]Rating must be 1-5, got {rating}[/red]")
        return 1

    review = {
        "reviewerName": reviewer_name,
        "rating": rating,
        "comment": comment.strip(),
    }
    try:
        ApiClient().add_post_review(post_id, review)
    except ApiError as exc:
        logger.error("Review for post %s failed: %s", post_id, exc)
        _err.print(f"[red]Error: {exc}[/red]")
        return 1

    _err.print(f"[green]Review submitted for {post_id}[/green]")
    return 0
