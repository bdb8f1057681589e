# src/primegraph/cli.py

"""
PrimeGraph - colored graphs as natural numbers

Description:
    A graph of colored nodes stands for the product of the primes of its
    node colors (white = 1, red = 2, blue = 3, green = 5, ...). Two graphs
    combine with star (×), dagger (+), gcd and lcm; results are drawn as
    connected graphs again.

usage: see primegraph -h
"""

from __future__ import annotations

import argparse
import faulthandler
import os
import sys
import textwrap
import threading
import time
import traceback
from importlib.resources import files as pkg_files
from typing import NamedTuple

from colorama import Fore, Style
from colorama import init as colorama_init

from primegraph import __version__ as _ver
from primegraph import config as CONFIG
from primegraph.colors import ColorRegistry, current_registry, use_registry
from primegraph.decode import number_to_graph
from primegraph.display import (
    print_colors,
    print_example_run,
    print_examples,
    print_graph,
    print_operation,
    print_profiles,
    show_intro_help,
)
from primegraph.encode import graph_to_number
from primegraph.examples import find_example, load_examples, run_example
from primegraph.factorization import check_bit_length
from primegraph.graph import Graph, format_graph_notation, parse_graph
from primegraph.operations import OPERATIONS, apply_operation, resolve_operation
from primegraph.primes import primes_up_to
from primegraph.runtime import APPLY, CFG, ensure_runtime_deps
from primegraph.runtime import current as _rt_current
from primegraph.utility import UserInputError, flatten_dotted, parse_int, typename
from primegraph.workspace import ensure_workspace_seeded, seed_workspace, workspace_dir

_INFIX = {"+", "*", "x", "×", "★", "†", "gcd", "lcm"}


# In memory session history
class HistoryItem(NamedTuple):
    operation: str
    slot1: str
    slot2: str
    result: str
    number: int
    timestamp: float


_HISTORY: list[HistoryItem] = []


def add_to_history(op: str, slot1: Graph, slot2: Graph, result: Graph, number: int) -> None:
    _HISTORY.append(HistoryItem(
        operation=op,
        slot1=format_graph_notation(slot1),
        slot2=format_graph_notation(slot2),
        result=format_graph_notation(result),
        number=number,
        timestamp=time.time(),
    ))


def get_history() -> list[HistoryItem]:
    return list(_HISTORY)


def clear_history() -> None:
    _HISTORY.clear()


def _install_loud_error_handlers(debug_on: bool) -> None:
    if not debug_on:
        return
    faulthandler.enable()

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook

    def _thread_excepthook(args):
        sys.stderr.write("\n[UNCAUGHT THREAD EXCEPTION]\n")
        traceback.print_exception(args.exc_type, args.exc_value, args.exc_traceback, file=sys.stderr)
        sys.stderr.flush()
    threading.excepthook = _thread_excepthook


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    prefix = f"{Fore.RED}Error:{Style.RESET_ALL}"
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{prefix} {msg}"
    print(msg, file=sys.stderr)


# ---- commands ----

def _do_operation(op_name: str, a: str, b: str, *, show_layout: bool, delay_s: float = 0.0) -> None:
    op = resolve_operation(op_name)
    slot1, slot2 = parse_graph(a), parse_graph(b)
    if delay_s > 0:
        sys.stdout.write(f"{Style.DIM} ⏳ {op} …{Style.RESET_ALL}")
        sys.stdout.flush()
        time.sleep(delay_s)
        sys.stdout.write("\r\x1b[2K")
        sys.stdout.flush()
    result = apply_operation(op, slot1, slot2)
    print_operation(op, slot1, slot2, result, show_layout=show_layout)
    add_to_history(op, slot1, slot2, result, graph_to_number(result).number)


def _do_colors(words: list[str]) -> None:
    if len(words) > 1:
        limit = parse_int(words[1])
        current_registry().preallocate(primes_up_to(limit))
    print_colors()


def run_command(words: list[str], *, show_layout: bool = True, delay_s: float = 0.0) -> bool:
    """
    Execute one command given as words. Returns False if the words are not a
    command (caller decides what else they could be).
    """
    if not words:
        return False
    head = words[0].lower()

    if head in OPERATIONS or head in ("*", "+", "x", "×"):
        if len(words) != 3:
            raise UserInputError(f"Invalid input: {head} needs exactly two graphs.")
        _do_operation(head, words[1], words[2], show_layout=show_layout, delay_s=delay_s)
        return True

    if len(words) == 3 and words[1].lower() in _INFIX:
        _do_operation(words[1], words[0], words[2], show_layout=show_layout, delay_s=delay_s)
        return True

    if head == "encode":
        if len(words) != 2:
            raise UserInputError("Invalid input: encode needs exactly one graph.")
        print_graph("Graph", parse_graph(words[1]), show_layout=show_layout)
        return True

    if head == "decode":
        if len(words) != 2:
            raise UserInputError("Invalid input: decode needs exactly one integer.")
        n = check_bit_length(parse_int(words[1]))
        print_graph(f"Canonical graph of {n}", number_to_graph(n), show_layout=show_layout)
        return True

    if head == "examples":
        print_examples(load_examples())
        return True

    if head == "example":
        if len(words) != 2:
            raise UserInputError("Invalid input: example needs an id or a position.")
        ex = find_example(words[1])
        if ex is None:
            raise UserInputError(f"Unknown example '{words[1]}'. Type 'examples' for the list.")
        run = run_example(ex)
        print_example_run(run, show_layout=show_layout)
        add_to_history(ex.operation, ex.slot1, ex.slot2, run.result, graph_to_number(run.result).number)
        return True

    if head == "colors":
        _do_colors(words)
        return True

    return False


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:

    epilog = textwrap.dedent("""\
    commands:
      encode GRAPH              number and factorization of a graph
      decode N                  canonical graph of N
      star|dagger|gcd|lcm G1 G2 combine two graphs (also: G1 + G2, G1 '*' G2)
      examples                  list the built-in examples
      example ID|N              run one example
      colors [LIMIT]            color table (optionally colors for primes <= LIMIT)
      profiles                  list profiles
      init [overwrite]          create the workspace (overwrite needs PRIMEGRAPH_DEV=1)
      where                     show workspace and package paths

    graphs:
      red-cyan-cyan   nodes chained by edges     red,blue   separate nodes
      red*4           four isolated red nodes    0          the empty graph

    Without a command an interactive session starts.
    """)

    p = argparse.ArgumentParser(
        prog="primegraph",
        description="PrimeGraph — colored graphs as natural numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    p.add_argument("items", nargs="*", metavar="command", help="command and its arguments")
    p.add_argument("--profile", default=None, help="profile to use (default: last used, else 'default')")
    p.add_argument("--no-layout", action="store_true", help="do not draw node positions")
    p.add_argument("--debug", action="store_true", help="trace output and full tracebacks")
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    return p


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except UserInputError as e:
        _print_user_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        if "--debug" in (argv if argv is not None else sys.argv):
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


def _select_profile_name(explicit: str | None) -> str:
    """explicit --profile → last used (from workspace) → 'default'"""
    if explicit:
        return explicit
    last = CONFIG.read_current_profile()
    if last and CONFIG.has_profile(last):
        return last
    return "default"


def _apply_profile(name: str, *, debug_flag: bool) -> None:
    selected = CONFIG.load_settings(name)
    APPLY(selected)
    rt = _rt_current()
    if debug_flag:
        rt.debug = True
    # colors follow the profile's palette
    use_registry(ColorRegistry.from_settings())

    if rt.debug:
        print(f"[debug] active profile: {selected.name}", file=sys.stderr)
        if selected._source:
            print(f"[debug] profile file: {selected._source}", file=sys.stderr)
        for k, v in sorted(flatten_dotted(rt.settings).items(), key=lambda kv: kv[0].lower()):
            print(f"        {k:.<40} {v!r} ({typename(v)})", file=sys.stderr)


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)

    parser = _build_parser()
    args = parser.parse_args(argv)
    rt = _rt_current()
    rt.debug = bool(args.debug)

    _install_loud_error_handlers(args.debug)

    if not ensure_runtime_deps(strict=True):
        return 1

    ensure_workspace_seeded()

    words = list(args.items)
    head = words[0].lower() if words else None

    if head == "init":
        if len(words) == 2 and words[1] == "overwrite":
            if os.environ.get("PRIMEGRAPH_DEV") != "1":
                print("Refusing to overwrite: set PRIMEGRAPH_DEV=1 to enable developer overwrite.")
                return 2
            ws, copied = seed_workspace(overwrite=True)
            print(f"Workspace ready at: {ws} (overwrote existing files)")
        else:
            ws, _, copied = ensure_workspace_seeded()
            print(f"Workspace ready at: {ws}")
        print(f"Copied -> profiles: {copied.get('profiles', 0)}, data: {copied.get('data', 0)}")
        return 0

    if head == "where":
        print(f"Workspace: {workspace_dir()}")
        print(f"Package:   {pkg_files('primegraph')}")
        return 0

    profile_name = _select_profile_name(args.profile)
    if args.profile and not CONFIG.has_profile(args.profile):
        print(f"Unknown profile: '{args.profile}'", file=sys.stderr)
        print("Available profiles:", ", ".join(CONFIG.list_all_profiles()), file=sys.stderr)
        return 2
    if not CONFIG.has_profile(profile_name):
        profile_name = "default"
    _apply_profile(profile_name, debug_flag=args.debug)

    if head == "profiles":
        print_profiles(CONFIG.list_all_profiles(), profile_name)
        return 0

    show_layout = not args.no_layout

    # --- one-shot command ---
    if words:
        if run_command(words, show_layout=show_layout):
            return 0
        if len(words) == 1:
            return _run_bare(words[0], show_layout=show_layout)
        raise UserInputError(f"Invalid input: '{' '.join(words)}'. See primegraph -h.")

    return _repl(profile_name, show_layout=show_layout)


def _run_bare(text: str, *, show_layout: bool) -> int:
    """A lone integer is decoded, a lone graph is encoded."""
    if text.strip().replace("_", "").isdigit():
        n = check_bit_length(parse_int(text))
        print_graph(f"Canonical graph of {n}", number_to_graph(n), show_layout=show_layout)
    else:
        print_graph("Graph", parse_graph(text), show_layout=show_layout)
    return 0


def _repl(profile_name: str, *, show_layout: bool) -> int:
    print(f"{Fore.YELLOW}{Style.BRIGHT}PrimeGraph v{_ver} — colored graphs as natural numbers{Style.RESET_ALL}")

    current_profile = profile_name
    while True:
        try:
            prompt = f"\nProfile: {current_profile} — Enter graphs, a number or a command (h=Help, q=Quit): "
            user_input = input(prompt).strip()

            low = user_input.lower()
            if low in {"", "q", "quit"}:
                break

            if low in {"h", "help"}:
                show_intro_help()
                continue

            if low in {"p", "profiles"}:
                print_profiles(CONFIG.list_all_profiles(), current_profile)
                continue

            if low in {"hist", "history"}:
                hist = get_history()
                if not hist:
                    print("History is empty.")
                    continue
                for item in hist:
                    ts = time.strftime("%H:%M:%S", time.localtime(item.timestamp))
                    print(f"{ts}  {item.slot1} {item.operation} {item.slot2} → {item.result}  (= {item.number})")
                continue

            if low.startswith("debug"):
                parts = low.split()
                rt = _rt_current()
                if len(parts) == 1 or parts[1] == "status":
                    print(f"Debug is currently {'ON' if rt.debug else 'OFF'}.")
                elif parts[1] == "on":
                    rt.debug = True
                    print("Debug mode enabled for this session.")
                elif parts[1] == "off":
                    rt.debug = False
                    print("Debug mode disabled for this session.")
                else:
                    print("Usage: DEBUG [on|off|status]")
                continue

            # profile switch
            if CONFIG.has_profile(user_input):
                _apply_profile(user_input, debug_flag=_rt_current().debug)
                CONFIG.write_current_profile(user_input)
                current_profile = user_input
                print(f"Applied profile: {current_profile}")
                continue

            delay_s = float(CFG("BEHAVIOUR.OPERATION_DELAY_MS", 0)) / 1000.0
            if run_command(user_input.split(), show_layout=show_layout, delay_s=delay_s):
                continue

            if len(user_input.split()) == 1:
                _run_bare(user_input, show_layout=show_layout)
                continue

            print(f"{Fore.RED}Invalid input: {Style.RESET_ALL}'{user_input}'. Type H for help.")
        except UserInputError as e:
            msg = str(e)
            prefix = f"{Fore.RED}Invalid input:{Style.RESET_ALL}"
            msg = msg.replace("Invalid input:", prefix, 1) if msg.startswith("Invalid input:") else f"{prefix} {msg}"
            print(msg, file=sys.stderr)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        except Exception as e:
            if _rt_current().debug:
                traceback.print_exc()
            else:
                _print_user_error(f"{e.__class__.__name__}: {e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
