"""
HTTP request CLI commands.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from httpinspector.errors import HTTPStatusError, InspectorError
from httpinspector.export.formatter import ExportFormat, export_response
from httpinspector.http.client import HTTPClient, HTTPResponse, format_json
from httpinspector.http.options import build_request

logger = logging.getLogger(__name__)


def request_options(with_body: bool):
    """Attach the options shared by every request command."""
    options = [
        click.option("-H", "--headers", help="Custom headers in JSON format"),
    ]
    if with_body:
        options.append(click.option("-d", "--data", help="Request body in JSON format"))
    options += [
        click.option("-Q", "--queryParams", "query_params",
                     help="Query parameters in JSON format"),
        click.option("-A", "--auth",
                     help='Basic authentication credentials in JSON format '
                          '(e.g. {"username":"user", "password":"pass"})'),
        click.option("-T", "--token", help="Bearer token for authentication"),
        click.option("-O", "--output", help="File to save the response data (json or csv)"),
        click.option("-F", "--format", "fmt",
                     help="Format of the output file (json or csv)"),
        click.option("--check-status", is_flag=True,
                     help="Exit with an error code on non-2xx responses"),
    ]

    def decorator(f):
        for option in reversed(options):
            f = option(f)
        return f

    return decorator


def _print_error(err_console: Console, error: Exception) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)


def _print_body(console: Console, body: Any) -> None:
    if isinstance(body, str):
        console.print(escape(body), soft_wrap=True)
    else:
        console.print(Syntax(format_json(body), "json", theme="monokai",
                             line_numbers=False, word_wrap=True))


def render_response(console: Console, resp: HTTPResponse) -> None:
    """Print status, timing, headers and body of a response."""
    if resp.redirect_chain:
        console.print("[yellow]Redirect chain:[/yellow]")
        for i, redirect_url in enumerate(resp.redirect_chain):
            console.print(f"  {i+1}. {escape(redirect_url)}", soft_wrap=True)

    if resp.is_success:
        status_color = "green"
    elif resp.is_redirect:
        status_color = "yellow"
    elif resp.is_client_error:
        status_color = "red"
    else:
        status_color = "red bold"

    console.print(f"[{status_color}]Status: {resp.status_code} "
                  f"{escape(resp.status_text)}[/{status_color}]")
    console.print(f"[green]Time: {resp.elapsed_ms:.2f} ms[/green]")

    console.print("[yellow]Headers:[/yellow]")
    table = Table(box=None, show_header=False)
    table.add_column("Header", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for h_name, h_value in resp.headers.items():
        table.add_row(escape(h_name), escape(h_value))
    console.print(table)

    console.print("[yellow]Response Data:[/yellow]")
    _print_body(console, resp.body)


def execute(ctx: click.Context, method: str, url: str, headers: str | None,
            data: str | None, query_params: str | None, auth: str | None,
            token: str | None, output: str | None, fmt: str | None,
            check_status: bool) -> None:
    """Parse options, send the request, display and optionally export."""
    settings = ctx.obj or {}
    console = Console()
    err_console = Console(stderr=True)

    export_format = None
    if output:
        export_format = ExportFormat.parse(fmt or settings.get("default_format"))

    req = build_request(method, url, headers=headers, data=data,
                        query_params=query_params, auth=auth, token=token)

    with HTTPClient(timeout=settings.get("timeout"),
                    verify_ssl=settings.get("verify_ssl", True)) as client:
        resp = client.request(req)

    if not resp.is_success:
        failure = HTTPStatusError(resp.status_code)
        _print_error(err_console, failure)
        render_response(console, resp)
        if output:
            logger.info("Skipping export of non-2xx response")
        if check_status:
            raise SystemExit(failure.exit_code)
        return

    render_response(console, resp)

    if output:
        file_path = export_response(resp.body, output, export_format)
        console.print(f"[green]Response data saved to {escape(str(file_path))}[/green]",
                      soft_wrap=True)


def run_request(ctx: click.Context, method: str, url: str, **options) -> None:
    """Top-level handler mapping inspector errors to messages and exit codes."""
    try:
        execute(ctx, method, url, **options)
    except InspectorError as e:
        logger.debug("%s %s failed: %s", method, url, e, exc_info=True)
        _print_error(Console(stderr=True), e)
        raise SystemExit(e.exit_code)


@click.command("get")
@click.argument("url")
@request_options(with_body=False)
@click.pass_context
def get_cmd(ctx, url: str, headers: str | None, query_params: str | None,
            auth: str | None, token: str | None, output: str | None,
            fmt: str | None, check_status: bool):
    """Send a GET request to a URL.

    Examples:
        httpinspector get https://api.example.com/users
        httpinspector get https://api.example.com/users -Q '{"page": "2"}' -O users.csv -F csv
    """
    run_request(ctx, "GET", url, headers=headers, data=None,
                query_params=query_params, auth=auth, token=token,
                output=output, fmt=fmt, check_status=check_status)


@click.command("post")
@click.argument("url")
@request_options(with_body=True)
@click.pass_context
def post_cmd(ctx, url: str, headers: str | None, data: str | None,
             query_params: str | None, auth: str | None, token: str | None,
             output: str | None, fmt: str | None, check_status: bool):
    """Send a POST request to a URL.

    Examples:
        httpinspector post https://api.example.com/users -d '{"name": "test"}'
        httpinspector post https://api.example.com/users -d '{"name": "test"}' -T token123
    """
    run_request(ctx, "POST", url, headers=headers, data=data,
                query_params=query_params, auth=auth, token=token,
                output=output, fmt=fmt, check_status=check_status)


@click.command("put")
@click.argument("url")
@request_options(with_body=True)
@click.pass_context
def put_cmd(ctx, url: str, headers: str | None, data: str | None,
            query_params: str | None, auth: str | None, token: str | None,
            output: str | None, fmt: str | None, check_status: bool):
    """Send a PUT request to a URL.

    Examples:
        httpinspector put https://api.example.com/users/1 -d '{"name": "renamed"}'
    """
    run_request(ctx, "PUT", url, headers=headers, data=data,
                query_params=query_params, auth=auth, token=token,
                output=output, fmt=fmt, check_status=check_status)


@click.command("delete")
@click.argument("url")
@request_options(with_body=False)
@click.pass_context
def delete_cmd(ctx, url: str, headers: str | None, query_params: str | None,
               auth: str | None, token: str | None, output: str | None,
               fmt: str | None, check_status: bool):
    """Send a DELETE request to a URL.

    Examples:
        httpinspector delete https://api.example.com/users/1 -A '{"username":"admin", "password":"secret"}'
    """
    run_request(ctx, "DELETE", url, headers=headers, data=None,
                query_params=query_params, auth=auth, token=token,
                output=output, fmt=fmt, check_status=check_status)


REQUEST_COMMANDS = [get_cmd, post_cmd, put_cmd, delete_cmd]
