# src/primegraph/display.py
from __future__ import annotations

import textwrap

from colorama import Fore, Style

from primegraph.colors import ColorRegistry, current_registry
from primegraph.encode import graph_to_number
from primegraph.examples import Example, ExampleRun
from primegraph.fmt import ball, format_edges, format_nodes, format_number, render_layout
from primegraph.graph import Graph, format_graph_notation
from primegraph.operations import ARITHMETIC, SYMBOLS
from primegraph.utility import get_terminal_width


def _header(text: str) -> str:
    return f"{Fore.CYAN + Style.BRIGHT}{text}{Style.RESET_ALL}"


def print_graph(title: str, graph: Graph, *, registry: ColorRegistry | None = None,
                show_layout: bool = True) -> None:
    reg = registry or current_registry()
    res = graph_to_number(graph, reg)
    print(_header(f"{title}:"))
    print(f"  number:   {format_number(res)}")
    print(f"  notation: {format_graph_notation(graph)}")
    print(f"  nodes:    {format_nodes(graph)}")
    print(f"  edges:    {format_edges(graph)}")
    if show_layout:
        for line in render_layout(graph):
            print(f"      {line}")


def print_operation(op: str, slot1: Graph, slot2: Graph, result: Graph, *,
                    registry: ColorRegistry | None = None, show_layout: bool = True) -> None:
    reg = registry or current_registry()
    n1 = graph_to_number(slot1, reg).number
    n2 = graph_to_number(slot2, reg).number
    n = graph_to_number(result, reg).number
    arith = ARITHMETIC[op]
    eq = f"{arith}({n1}, {n2}) = {n}" if arith in ("gcd", "lcm") else f"{n1} {arith} {n2} = {n}"

    print(f"{Style.BRIGHT}{format_graph_notation(slot1)} {SYMBOLS[op]} {format_graph_notation(slot2)}"
          f"{Style.RESET_ALL}   {Style.DIM}({eq}){Style.RESET_ALL}")
    print_graph("Result", result, registry=reg, show_layout=show_layout)


def print_examples(examples: list[Example]) -> None:
    width = max(60, get_terminal_width())
    print(_header("Examples:"))
    for i, ex in enumerate(examples, start=1):
        print(f"  {i:>2}. {Style.BRIGHT}{ex.title}{Style.RESET_ALL}  [{SYMBOLS[ex.operation]}]")
        if ex.description:
            body = textwrap.fill(ex.description, width=width - 8,
                                 initial_indent=" " * 6, subsequent_indent=" " * 6)
            print(f"{Style.DIM}{body}{Style.RESET_ALL}")


def print_example_run(run: ExampleRun, *, registry: ColorRegistry | None = None,
                      show_layout: bool = True) -> None:
    ex = run.example
    print(_header(ex.title))
    if ex.description:
        print(f"{Style.DIM}{ex.description}{Style.RESET_ALL}")
    print_operation(ex.operation, ex.slot1, ex.slot2, run.result, registry=registry, show_layout=show_layout)
    if run.ok is None:
        return
    status = f"{Fore.GREEN}matches{Style.RESET_ALL}" if run.ok else f"{Fore.RED}differs{Style.RESET_ALL}"
    print(f"  expected: {format_graph_notation(ex.expected)} ({status})")


def print_colors(registry: ColorRegistry | None = None) -> None:
    reg = registry or current_registry()
    print(_header("Colors:"))
    for color, prime in reg.all_colors():
        alias = "  (alias: gray)" if prime == 1 else ""
        print(f"  {ball(color)} {color:<10} {prime:>6}   {reg.color_value(color)}{alias}")


def print_profiles(items: list[str], active: str | None) -> None:
    print(_header("Profiles:"))
    for name in items:
        mark = "*" if name == active else " "
        print(f"  {mark} {name}")


def show_intro_help() -> None:
    print(textwrap.dedent(f"""\
    {_header("Graphs")}
      red-cyan-cyan     three nodes chained by edges
      red,blue          two separate nodes
      red*4             four red nodes
      0                 the empty graph
      white = 1, red = 2, blue = 3, green = 5, yellow = 7, cyan = 11, magenta = 13

    {_header("Commands")}
      <graph> + <graph>          dagger (addition)
      <graph> * <graph>          star (multiplication)
      gcd <graph> <graph>        greatest common divisor
      lcm <graph> <graph>        least common multiple
      star|dagger <graph> <graph>
      encode <graph>             the number of a graph
      <integer>                  the canonical graph of a number
      examples                   list the examples;  example <n>  runs one
      colors                     the color table
      hist                       operations of this session
      debug on|off               toggle trace output
      h                          this help;  q  quit
    """))
