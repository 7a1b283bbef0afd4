"""Click CLI entry point for PhoneGuard content."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import TYPE_CHECKING, Any

import click
from pydantic import BaseModel

from phoneguard.cms.stack import build_stack
from phoneguard.config import Settings
from phoneguard.content.fetcher import ContentFetcher
from phoneguard.content.service import ContentService
from phoneguard.logging import configure_logging
from phoneguard.models.content import PriceRange, SearchQuery

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


def _run(settings: Settings, call: Callable[[ContentService], Awaitable[Any]]) -> Any:
    """Run one accessor call with a freshly built stack, closing it afterwards."""

    async def runner() -> Any:
        stack = build_stack(settings)
        try:
            return await call(ContentService(ContentFetcher(stack)))
        finally:
            if stack is not None:
                await stack.aclose()

    return asyncio.run(runner())


def _echo(result: Any) -> None:
    if isinstance(result, BaseModel):
        payload: Any = result.model_dump(mode="json", by_alias=True)
    elif isinstance(result, list):
        payload = [
            r.model_dump(mode="json", by_alias=True) if isinstance(r, BaseModel) else r
            for r in result
        ]
    else:
        payload = result
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _json_option(raw: str | None, name: str) -> dict[str, Any] | None:
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint=name) from exc
    if not isinstance(value, dict):
        raise click.BadParameter("must be a JSON object", param_hint=name)
    return value


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """PhoneGuard: site content from Contentstack, with mock fallback."""
    ctx.ensure_object(dict)
    settings = Settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)
    ctx.obj["settings"] = settings


@cli.command()
@click.option("--featured", is_flag=True, help="Only featured testimonials")
@click.option("--limit", type=click.IntRange(min=1), default=None)
@click.option("--rating", type=click.IntRange(1, 5), default=None, help="Minimum rating")
@click.option("--include-author", is_flag=True)
@click.option("--locale", default=None)
@click.pass_context
def testimonials(
    ctx: click.Context,
    featured: bool,
    limit: int | None,
    rating: int | None,
    include_author: bool,
    locale: str | None,
) -> None:
    """List testimonials, newest first."""
    _echo(
        _run(
            ctx.obj["settings"],
            lambda s: s.get_testimonials(
                featured,
                limit=limit,
                rating=rating,
                include_author=include_author,
                locale=locale,
            ),
        )
    )


@cli.command()
@click.option("--brand", default=None)
@click.option("--model", "model_name", default=None)
@click.option("--featured", is_flag=True)
@click.option("--limit", type=click.IntRange(min=1), default=None)
@click.option("--min-price", type=float, default=None)
@click.option("--max-price", type=float, default=None)
@click.pass_context
def plans(
    ctx: click.Context,
    brand: str | None,
    model_name: str | None,
    featured: bool,
    limit: int | None,
    min_price: float | None,
    max_price: float | None,
) -> None:
    """List insurance plans for a brand/model."""
    price_range = None
    if min_price is not None or max_price is not None:
        price_range = PriceRange(min=min_price, max=max_price)
    _echo(
        _run(
            ctx.obj["settings"],
            lambda s: s.get_insurance_plans(
                brand, model_name, limit=limit, featured=featured, price_range=price_range
            ),
        )
    )


@cli.command()
@click.argument("page")
@click.option("--locale", default=None)
@click.option("--include-assets", is_flag=True)
@click.pass_context
def hero(ctx: click.Context, page: str, locale: str | None, include_assets: bool) -> None:
    """Show the hero banner for PAGE."""
    heroes = _run(
        ctx.obj["settings"],
        lambda s: s.get_hero_content(page, locale=locale, include_assets=include_assets),
    )
    if not heroes:
        click.echo(f"No hero content for page '{page}'", err=True)
        sys.exit(1)
    _echo(heroes[0])


@cli.command()
@click.option("--page", default=None)
@click.option("--featured", is_flag=True)
@click.option("--limit", type=click.IntRange(min=1), default=None)
@click.option("--locale", default=None)
@click.pass_context
def benefits(
    ctx: click.Context,
    page: str | None,
    featured: bool,
    limit: int | None,
    locale: str | None,
) -> None:
    """List benefit cards."""
    _echo(
        _run(
            ctx.obj["settings"],
            lambda s: s.get_benefits(page, limit=limit, featured=featured, locale=locale),
        )
    )


@cli.command()
@click.argument("name", type=click.Choice(["home", "about", "contact"], case_sensitive=False))
@click.option("--locale", default=None)
@click.option("--with-references", is_flag=True, help="Resolve referenced entries")
@click.pass_context
def page(ctx: click.Context, name: str, locale: str | None, with_references: bool) -> None:
    """Show a page bundle (home, about or contact)."""

    def fetch(s: ContentService) -> Awaitable[Any]:
        if name == "home":
            return s.get_home_page_content(locale=locale, include_references=with_references)
        if name == "about":
            return s.get_about_page_content(locale=locale, include_values=with_references)
        return s.get_contact_page_content(locale=locale, include_references=with_references)

    entry = _run(ctx.obj["settings"], fetch)
    if entry is None:
        click.echo(f"No content for page '{name}'", err=True)
        sys.exit(1)
    _echo(entry)


@cli.command()
@click.argument("content_type")
@click.argument("term")
@click.option("--field", "fields", multiple=True, default=("title",), help="Field to match")
@click.option("--filters", default=None, help="Extra conditions as a JSON object")
@click.option("--limit", type=click.IntRange(min=1), default=None)
@click.option("--locale", default=None)
@click.pass_context
def search(
    ctx: click.Context,
    content_type: str,
    term: str,
    fields: tuple[str, ...],
    filters: str | None,
    limit: int | None,
    locale: str | None,
) -> None:
    """Search CONTENT_TYPE entries for TERM."""
    query = SearchQuery(
        search_term=term,
        search_fields=list(fields),
        filters=_json_option(filters, "--filters"),
        limit=limit,
        locale=locale,
    )
    _echo(_run(ctx.obj["settings"], lambda s: s.search_content(content_type, query)))


@cli.command()
@click.argument("content_type")
@click.option("--page", "page_number", type=click.IntRange(min=1), default=1)
@click.option("--page-size", type=click.IntRange(min=1), default=10)
@click.option("--where", default=None, help="Conditions as a JSON object")
@click.option("--order", default=None, help="Field to sort by; prefix with - for descending")
@click.option("--locale", default=None)
@click.pass_context
def entries(
    ctx: click.Context,
    content_type: str,
    page_number: int,
    page_size: int,
    where: str | None,
    order: str | None,
    locale: str | None,
) -> None:
    """Show one page of CONTENT_TYPE entries."""
    conditions = _json_option(where, "--where")
    _echo(
        _run(
            ctx.obj["settings"],
            lambda s: s.get_paginated_entries(
                content_type,
                page_number,
                page_size,
                where=conditions,
                order=order,
                locale=locale,
            ),
        )
    )


@cli.command("config-check")
@click.pass_context
def config_check(ctx: click.Context) -> None:
    """Show which Contentstack credentials are configured."""
    settings: Settings = ctx.obj["settings"]
    checks = {
        "CONTENTSTACK_API_KEY": bool(settings.contentstack_api_key),
        "CONTENTSTACK_DELIVERY_TOKEN": bool(settings.contentstack_delivery_token),
        "CONTENTSTACK_ENVIRONMENT": bool(settings.contentstack_environment),
    }
    for name, ok in checks.items():
        click.echo(f"  {name}: {'set' if ok else 'missing'}")
    if settings.contentstack_configured:
        click.echo(f"Live content from {settings.contentstack_host}")
    else:
        click.echo("Serving mock content (credentials incomplete)")


@cli.command()
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", type=int, default=None, help="Port (default from settings)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the content API server."""
    import uvicorn

    settings: Settings = ctx.obj["settings"]
    uvicorn.run(
        "phoneguard.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


if __name__ == "__main__":
    cli()
