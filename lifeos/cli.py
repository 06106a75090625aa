"""CLI interface for LifeOS"""

import argparse
import logging
import random
import sys
import textwrap
import time
from pathlib import Path

from colorama import init, Fore, Style

from . import __version__, __author__, __powered_by__
from . import config
from .agent import MODES, LifeOSAgent
from .storage import InMemoryStore, JsonFileStore, PersistenceFailure

# Initialize colorama for Windows support
init(autoreset=True)

logger = logging.getLogger(__name__)


# ── Typewriter helper ────────────────────────────────────────────────────────
def _typewrite(text: str, color: str = Fore.WHITE, delay: float = 0.013, end: str = '\n'):
    """Print text with a typewriter effect, one character at a time."""
    if len(text) > 400:
        delay = 0.005
    elif len(text) > 200:
        delay = 0.009
    sys.stdout.write(color)
    sys.stdout.flush()
    for ch in text:
        sys.stdout.write(ch)
        sys.stdout.flush()
        if delay:
            time.sleep(delay)
    sys.stdout.write(Style.RESET_ALL + end)
    sys.stdout.flush()


class LifeOSCLI:
    """Interactive CLI for the LifeOS agent"""

    COMMANDS = (
        ("help",      "Show this help message"),
        ("memory",    "Show what LifeOS remembers about you"),
        ("history",   "Show the recent conversation"),
        ("reminders", "List your latest reminders"),
        ("notes",     "List your latest notes"),
        ("clear",     "Forget remembered facts and the conversation"),
        ("version",   "Show version and credits"),
        ("quit",      "Exit the application"),
    )

    def __init__(self, agent: LifeOSAgent, animate: bool = True):
        self.agent = agent
        self.animate = animate
        self.running = False

    def _write(self, text: str, color: str = Fore.WHITE, delay: float = 0.013):
        if self.animate:
            _typewrite(text, color, delay=delay)
        else:
            print(f"{color}{text}{Style.RESET_ALL}")

    def print_banner(self):
        W = config.CLI_WIDTH - 18
        title_text = '·  L i f e O S  ·'
        sub_text = 'Offline Bilingual Assistant (English · فارسی)'

        lines = [
            "",
            f"{Fore.MAGENTA}╔{'═' * W}╗{Style.RESET_ALL}",
            f"{Fore.MAGENTA}║{Fore.CYAN + Style.BRIGHT}{title_text:^{W}}{Style.RESET_ALL}{Fore.MAGENTA}║{Style.RESET_ALL}",
            f"{Fore.MAGENTA}║{Fore.YELLOW}{sub_text:^{W}}{Style.RESET_ALL}{Fore.MAGENTA}║{Style.RESET_ALL}",
            f"{Fore.MAGENTA}║{'─' * W}║{Style.RESET_ALL}",
            f"{Fore.MAGENTA}║  {Fore.WHITE}Mode    : {Fore.GREEN}{self.agent.mode:<{W - 12}}{Fore.MAGENTA}║{Style.RESET_ALL}",
            f"{Fore.MAGENTA}║  {Fore.WHITE}Version : {Fore.GREEN}{'v' + __version__:<{W - 12}}{Fore.MAGENTA}║{Style.RESET_ALL}",
            f"{Fore.MAGENTA}╚{'═' * W}╝{Style.RESET_ALL}",
            "",
        ]
        for line in lines:
            print(line)

    def print_help(self):
        bar = f"{Fore.CYAN}{'─' * 60}{Style.RESET_ALL}"
        print(f"\n{bar}")
        print(f"{Fore.CYAN + Style.BRIGHT}  Commands{Style.RESET_ALL}")
        print(bar)
        for cmd, desc in self.COMMANDS:
            print(f"  {Fore.GREEN}{cmd:<10}{Style.RESET_ALL}{Fore.WHITE}{desc}{Style.RESET_ALL}")

        print(f"\n{Fore.CYAN + Style.BRIGHT}  Examples{Style.RESET_ALL}")
        for ex in (
            "What time is it?",
            "Remind me to call mom in 10 minutes",
            "What is 12 * 4?",
            "سلام",
        ):
            print(f"  {Fore.YELLOW}›{Style.RESET_ALL} {ex}")
        print(f"{bar}\n")

    def print_response(self, text: str):
        sep = f"{Fore.GREEN}{'─' * 62}{Style.RESET_ALL}"
        print(f"\n{sep}")
        print(f"{Fore.GREEN + Style.BRIGHT}  {config.CLI_ASSISTANT}{Style.RESET_ALL}")
        print(sep)
        for raw_line in text.splitlines():
            chunks = textwrap.wrap(raw_line, width=config.CLI_WIDTH) if len(raw_line) > config.CLI_WIDTH else [raw_line]
            for line in chunks:
                if line.strip():
                    self._write(line)
                else:
                    print(line)
        print(f"{sep}\n")

    def print_error(self, error: str):
        print(f"\n{Fore.RED}  ✗  {error}{Style.RESET_ALL}\n")

    def get_input(self) -> str:
        try:
            prompt = (
                f"{Fore.LIGHTMAGENTA_EX}  ╰─{Style.RESET_ALL}"
                f"{Fore.LIGHTMAGENTA_EX + Style.BRIGHT} {config.CLI_PROMPT} {Style.RESET_ALL}"
                f"{Fore.LIGHTMAGENTA_EX}›{Style.RESET_ALL} "
            )
            return input(prompt).strip()
        except (KeyboardInterrupt, EOFError):
            return "quit"

    def print_memory(self):
        facts = self.agent.memory.describe()
        print(f"\n  {facts or 'Nothing remembered yet.'}\n")

    def print_history(self):
        transcript = self.agent.history.get_context_string(n=config.MAX_CONVERSATION_HISTORY)
        print(f"\n{transcript or '  No conversation yet.'}\n")

    def print_items(self, title: str, items):
        print(f"\n{Fore.CYAN + Style.BRIGHT}  {title}{Style.RESET_ALL}")
        if not items:
            print("  (none)\n")
            return
        for item in items:
            when = getattr(item, "trigger_at", None) or item.created_at
            print(f"  {Fore.YELLOW}•{Style.RESET_ALL} {item.content}  {Fore.WHITE}{when:%Y-%m-%d %H:%M}{Style.RESET_ALL}")
        print()

    def print_version(self):
        print()
        print(f"{Fore.CYAN + Style.BRIGHT}  LifeOS v{__version__}{Style.RESET_ALL}")
        print(f"  {Fore.GREEN}Developer : {__author__}{Style.RESET_ALL}")
        print(f"  {Fore.CYAN}Powered by: {__powered_by__}{Style.RESET_ALL}")
        print()

    def handle_command(self, command: str):
        """
        Handle special commands.
        Returns True to continue, False to exit, None if not a command.
        """
        cmd = command.lower()

        if cmd in ('quit', 'exit', 'q'):
            self._write("\n  Goodbye! 👋", Fore.MAGENTA, delay=0.022)
            return False

        if cmd == 'help':
            self.print_help()
            return True

        if cmd == 'version':
            self.print_version()
            return True

        if cmd == 'memory':
            self.print_memory()
            return True

        if cmd == 'history':
            self.print_history()
            return True

        if cmd in ('reminders', 'notes'):
            try:
                items = self.agent.reminders() if cmd == 'reminders' else self.agent.notes()
            except PersistenceFailure as e:
                self.print_error(str(e))
                return True
            self.print_items(cmd.capitalize(), items)
            return True

        if cmd == 'clear':
            self.agent.clear_memory()
            print(f"{Fore.GREEN}  ✓  Memory and conversation cleared{Style.RESET_ALL}\n")
            return True

        return None  # Not a command

    def run(self):
        """Main CLI loop."""
        self.print_banner()
        self.print_help()
        self.print_response(self.agent.get_greeting())

        self.running = True
        while self.running:
            try:
                user_input = self.get_input()
                if not user_input:
                    continue

                result = self.handle_command(user_input)
                if result is False:
                    break
                if result is True:
                    continue

                self.print_response(self.agent.ask(user_input))

            except KeyboardInterrupt:
                print(f"\n{Fore.YELLOW}  Use 'quit' to exit.{Style.RESET_ALL}\n")
            except Exception as e:
                self.print_error(f"Unexpected error: {e}")
                logger.exception("Unexpected error in main loop")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifeos",
        description="LifeOS — offline bilingual (English/Farsi) conversational assistant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Developed by: {__author__}\n"
            f"Powered by:   {__powered_by__}\n"
            f"Version:      {__version__}"
        ),
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"LifeOS v{__version__}",
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help=f"JSON file for reminders and notes (default: {config.STORE_FILE})",
    )
    parser.add_argument(
        "--memory-only",
        action="store_true",
        help="Keep reminders and notes in memory only",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reply selection, for reproducible sessions",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=config.DEFAULT_MODE,
        help="Which response regime answers the user",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log rule matches and routing decisions",
    )
    return parser


def main(argv=None):
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("lifeos"):
                logging.getLogger(name).setLevel(logging.DEBUG)

    store = InMemoryStore() if args.memory_only else JsonFileStore(args.store)
    rng = random.Random(args.seed) if args.seed is not None else None

    cli = LifeOSCLI(LifeOSAgent(store=store, rng=rng, mode=args.mode))
    try:
        cli.run()
    except Exception as e:
        print(f"{Fore.RED}Fatal error: {e}{Style.RESET_ALL}")
        logging.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
