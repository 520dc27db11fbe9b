"""Generate command implementation."""

import sys
from datetime import date

import click
from dateutil import parser as date_parser

from ..changelog import detect_project_version, update_changelog_file, write_section_file
from ..config import KNOWN_PROVIDERS
from ..git import GitError, GitRepository, build_range
from ..providers import ChangelogRequest, ProviderError, get_provider

API_KEY_ENV = {
    'openai': 'OPENAI_API_KEY',
    'xai': 'XAI_API_KEY or GITHUB_TOKEN',
}


def fail(message):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def parse_release_date(value):
    """Normalize a user supplied date to YYYY-MM-DD."""
    if not value:
        return date.today().isoformat()
    try:
        return date_parser.parse(value).date().isoformat()
    except (ValueError, OverflowError) as e:
        raise click.BadParameter(f"cannot parse date '{value}': {e}", param_hint='--date')


def validate_commit_url(ctx, param, value):
    """Reject templates using placeholders other than {hash} and {short_hash}."""
    if value:
        try:
            value.format(hash='0' * 40, short_hash='0' * 7)
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise click.BadParameter(f"unsupported placeholder in '{value}' ({e!r}). "
                                     "Use {hash} or {short_hash}")
    return value


def link_commit(commit, url_template):
    """Append a Markdown link to the commit to its subject."""
    url = url_template.format(hash=commit.hash, short_hash=commit.hash[:7])
    return commit.model_copy(update={'subject': f"{commit.subject} ([{commit.hash[:7]}]({url}))"})


def provider_options(name, config):
    if name == 'openai':
        return {'model': config.openai_model, 'timeout': config.timeout}
    return {'model': config.xai_model, 'base_url': config.xai_base_url, 'timeout': config.timeout}


@click.command()
@click.option('--from', 'from_ref', help='Start reference (default: last tag)')
@click.option('--to', 'to_ref', default='HEAD', show_default=True, help='End reference')
@click.option('--provider', type=click.Choice(KNOWN_PROVIDERS, case_sensitive=False),
              help='AI provider (default: from configuration, xai)')
@click.option('--release-version', '-v', help='Version to describe (default: from pyproject.toml or package.json)')
@click.option('--date', 'release_date', help='Release date (default: today)')
@click.option('--write', is_flag=True, help='Insert the section into the changelog file')
@click.option('--file', '-f', 'changelog_file', help='Changelog file path (default: CHANGELOG.md)')
@click.option('--out', '-o', help='Write the section to a separate file')
@click.option('--dry-run', is_flag=True, help='Show a preview without writing any file')
@click.option('--commit-url', callback=validate_commit_url,
              help='Link each commit, e.g. https://github.com/org/repo/commit/{hash}')
@click.pass_context
def generate(ctx, from_ref, to_ref, provider, release_version, release_date, write, changelog_file,
             out, dry_run, commit_url):
    """Generate a changelog section for a range of commits."""

    config = ctx.obj['config']
    logger = ctx.obj['logger']
    provider_name = (provider or config.provider).lower()
    changelog_file = changelog_file or config.changelog_file
    release_date = parse_release_date(release_date)

    if not release_version:
        project = detect_project_version()
        if not project:
            fail("no version given and none found in pyproject.toml or package.json. "
                 "Use --release-version")
        project_name, release_version = project
        click.echo(f"Project: {project_name}")

    repo = GitRepository(logger=logger)
    try:
        from_ref = from_ref or repo.get_last_tag()
        revision_range = build_range(from_ref, to_ref)
        commits = repo.get_commits(revision_range)
    except GitError as e:
        fail(f"failed to read git log. Are you in a git repository? ({e})")

    click.echo(f"Version: {release_version}")
    click.echo(f"Date: {release_date}")
    click.echo(f"Range: {revision_range}")

    if not commits:
        fail("No commits found in the specified range")

    click.echo(f"Found {len(commits)} commits")

    if commit_url:
        commits = [link_commit(c, commit_url) for c in commits]

    api_key = config.api_key_for(provider_name)
    if not api_key:
        fail(f"missing API key for {provider_name}. Set {API_KEY_ENV[provider_name]} or use a config file")

    try:
        request = ChangelogRequest.from_commits(release_version, release_date, commits)
    except ValueError as e:
        fail(f"invalid changelog request: {e}")

    changelog_provider = get_provider(provider_name, api_key, **provider_options(provider_name, config))

    click.echo(f"Generating changelog with {provider_name}...")
    try:
        generated = changelog_provider.generate_changelog(request)
    except ProviderError as e:
        logger.debug(f"Provider failure: {e!r}")
        fail(f"failed to generate changelog: {e}")

    if dry_run or not (write or out):
        click.echo("----- BEGIN CHANGELOG PREVIEW -----")
        click.echo(generated)
        click.echo("----- END CHANGELOG PREVIEW -----")
        if dry_run and (write or out):
            click.echo("(Dry run - no changes made)")
        return

    try:
        if write:
            update_changelog_file(changelog_file, generated)
            click.echo(f"Wrote {changelog_file} with {release_version}")
        if out:
            write_section_file(out, generated)
            click.echo(f"Wrote {out}")
    except OSError as e:
        fail(f"failed to write changelog: {e}")
