import click
from flask import current_app
from flask.cli import AppGroup

from portfolio.application.content.settings import get_settings
from portfolio.extensions import db
from portfolio.models import Section, User
from portfolio.utils.media import purge_pending_deletions

assets_cli = AppGroup("assets", help="Remote image maintenance.")

DEFAULT_SECTIONS = (
    ("hero", "PORTFOLIO", "hero"),
    ("introduction", "INTRODUCTION", "introduction"),
    ("projects", "PROJECTS", "projects"),
    ("education", "EDUCATION", "education"),
    ("skills", "SKILLS", "skills"),
    ("experience", "EXPERIENCE", "experience"),
    ("testimonials", "TESTIMONIALS", "testimonials"),
    ("contact", "CONTACT", "contact"),
)


@assets_cli.command("purge")
def purge_assets():
    """Retry every queued remote image delete."""
    purged, remaining = purge_pending_deletions()
    click.echo(f"Purged {purged} remote asset(s); {remaining} still pending.")


@click.command("seed")
def seed():
    """Create missing tables, site settings, the admin user and default sections."""
    db.create_all()
    get_settings()

    email = current_app.config.get("ADMIN_EMAIL")
    password = current_app.config.get("ADMIN_PASSWORD")

    if email and password:
        email = email.strip().lower()
        if not User.query.filter_by(email=email).first():
            user = User()
            user.email = email
            user.name = current_app.config.get("ADMIN_NAME")
            user.is_admin = True
            user.set_password(password)
            db.session.add(user)
            click.echo(f"Created admin user {email}")
    else:
        click.echo("ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping admin user")

    for order, (slug, title, section_type) in enumerate(DEFAULT_SECTIONS):
        if Section.query.filter_by(slug=slug).first():
            continue
        section = Section()
        section.slug = slug
        section.title = title
        section.type = section_type
        section.order = order
        section.visible = True
        section.settings = {}
        db.session.add(section)
        click.echo(f"Created section {slug}")

    db.session.commit()


def register_commands(app):
    app.cli.add_command(assets_cli)
    app.cli.add_command(seed)
