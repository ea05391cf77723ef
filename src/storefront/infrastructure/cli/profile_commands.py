"""CLI commands for the user profile."""

from __future__ import annotations

import click

from storefront.application.dto import ProfileDTO
from storefront.application.manage_profile import ProfileHandler
from storefront.infrastructure.cli.runner import run


def _profiles(settings, stores) -> ProfileHandler:
    return ProfileHandler(stores.profiles, settings.timeout)


def display_profile(profile: ProfileDTO) -> None:
    click.echo(profile.name)
    click.echo(f"Email:  {profile.email or '-'}")
    click.echo(f"Phone:  {profile.phone or '-'}")


@click.command("show")
def profile_show() -> None:
    """Show your profile."""

    async def action(settings, stores, session):
        return await _profiles(settings, stores).show(session.require_user())

    display_profile(run(action))


@click.command("update")
@click.option("--name", "full_name", default=None, help="Full name.")
@click.option("--phone", default=None, help="Phone number.")
def profile_update(full_name: str | None, phone: str | None) -> None:
    """Change your name or phone number."""

    async def action(settings, stores, session):
        return await _profiles(settings, stores).update(
            session.require_user(), full_name=full_name, phone=phone
        )

    profile = run(action)
    click.echo("Profile updated.")
    display_profile(profile)
