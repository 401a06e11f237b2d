# cli.py
import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.catalog import CatalogClient
from storefront.config import Settings
from storefront.coordinator import COMMANDS, Storefront
from storefront.log import configure_logging

console = Console()

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# Autocompletion
# ---------------------------
def get_command_completer(store: Storefront) -> WordCompleter:
    ids = [str(p.id) for p in store.products]
    return WordCompleter(COMMANDS + ids, ignore_case=True)


# ---------------------------
# Screen
# ---------------------------
def load_products(store: Storefront):
    # the spinner stays up until the one fetch settles
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
        console=console,
    ) as progress:
        progress.add_task(description="Loading products...", total=None)
        store.mount()


def draw(store: Storefront):
    console.clear()
    console.print(store.render())
    if store.status_message:
        console.print(show_status(store.status_message, False))


def run(store: Storefront):
    load_products(store)
    draw(store)
    if not store.query.is_success:
        return

    completer = get_command_completer(store)
    while True:
        command = prompt("\n🛒 > ", completer=completer, style=custom_style)
        if not store.dispatch(command):
            console.print(Panel.fit("[bold green]Thanks for shopping! 👋[/bold green]", title="Goodbye"))
            return
        draw(store)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal storefront with a cart drawer")
    parser.add_argument("--catalog-url", help="Base URL of the catalog API (serves /products)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--once", action="store_true", help="Render the storefront once and exit")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    settings = Settings()
    overrides = {
        "catalog_url": args.catalog_url,
        "timeout": args.timeout,
        "log_level": args.log_level,
    }
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    configure_logging(settings.log_level, console=console)
    client = CatalogClient(base_url=settings.catalog_url, timeout=settings.timeout)
    store = Storefront(client)
    try:
        if args.once:
            load_products(store)
            console.print(store.render())
        else:
            run(store)
    finally:
        client.close()


def entrypoint():
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    entrypoint()
