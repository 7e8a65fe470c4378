"""CLI entry point for critiqueboard."""

import copy
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from .config import load_config, DEFAULT_CONFIG

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """critiqueboard - critique, deduplicate and organise design decisions."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        from rich.logging import RichHandler
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console)])


def _get_config(ctx) -> dict:
    return load_config(ctx.obj.get("config_path"))


def _read_lines(path: str) -> list[str]:
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return [line.strip() for line in text.splitlines() if line.strip()]


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/]")
    sys.exit(1)


@cli.command()
@click.option("--path", default=None, help="Custom base path")
def init(path):
    """Initialize the analyses directory and configuration."""
    import yaml

    base_path = Path(path).expanduser().resolve() if path else Path("~/.critiqueboard").expanduser()
    console.print(f"[bold green]Initializing critiqueboard at {base_path}[/]")

    (base_path / "analyses").mkdir(parents=True, exist_ok=True)

    config_file = base_path / "config.yaml"
    if not config_file.exists():
        cfg = copy.deepcopy(DEFAULT_CONFIG)
        cfg["analyses_path"] = str(base_path / "analyses")
        header = (
            "# Claude API key for critique (or set ANTHROPIC_API_KEY env var)\n"
            "# claude_api_key: sk-ant-your-key-here\n\n"
            "# merge.strategy: weighted (stem/word/sequence, 0.6) or jaccard (word overlap, 0.7)\n\n"
        )
        config_file.write_text(header + yaml.dump(cfg, default_flow_style=False, sort_keys=False))
        console.print(f"  Created config: {config_file}")

    console.print("[bold green]✓ critiqueboard initialized![/]")


@cli.command()
@click.argument("text1")
@click.argument("text2")
def similarity(text1, text2):
    """Score how similar two points are."""
    from .text.similarity import get_similarity, jaccard_similarity, similarity_components

    parts = similarity_components(text1, text2)
    table = Table(title="Similarity")
    table.add_column("Measure", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_row("weighted", f"{get_similarity(text1, text2):.3f}")
    for name in ("stem", "word", "sequence"):
        table.add_row(f"  {name}", f"{parts[name]:.3f}")
    table.add_row("jaccard", f"{jaccard_similarity(text1, text2):.3f}")
    console.print(table)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--strategy", type=click.Choice(["weighted", "jaccard"]), default=None, help="Merge strategy")
@click.option("--threshold", type=float, default=None, help="Override the strategy threshold")
@click.option("--split", "split_input", is_flag=True, help="Treat FILE as a raw model response")
@click.pass_context
def merge(ctx, file, strategy, threshold, split_input):
    """Merge near-duplicate points read from FILE (one per line)."""
    from .text.merge import get_merge_strategy
    from .text.split import split_response

    config = _get_config(ctx)
    merge_cfg = config.get("merge", {})
    strategy = strategy or merge_cfg.get("strategy", "weighted")
    if threshold is None:
        threshold = merge_cfg.get(f"{strategy}_threshold")

    if split_input:
        points = split_response(Path(file).read_text(encoding="utf-8", errors="replace"))
    else:
        points = _read_lines(file)

    if not points:
        console.print("[yellow]No points to merge.[/]")
        return

    merged = get_merge_strategy(strategy, threshold).merge(points)
    console.print(f"[green]✓ {len(points)} point(s) merged into {len(merged)} ({strategy})[/]")
    for point in merged:
        console.print(f"  • {point}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def split(file):
    """Split a raw model response into points."""
    from .text.split import split_response

    points = split_response(Path(file).read_text(encoding="utf-8", errors="replace"))
    if not points:
        console.print("[yellow]No points found.[/]")
        return
    for i, point in enumerate(points, 1):
        console.print(f"  {i}. {point}")


def _add_branch(parent: Tree, node) -> None:
    branch = parent.add(f"{node.content} [dim]({node.id})[/]")
    for child in node.children:
        _add_branch(branch, child)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the forest as JSON")
@click.option("--match", type=click.Choice(["content", "id"]), default="content", help="How connectors reference notes")
def tree(file, as_json, match):
    """Build the decision forest from a board export (YAML or JSON)."""
    from .board.loader import load_board
    from .board.tree import MATCHERS, build_decision_tree

    try:
        notes, connections = load_board(Path(file))
    except ValueError as e:
        _fail(str(e))

    forest = build_decision_tree(notes, connections, matcher=MATCHERS[match]())

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in forest], indent=2, ensure_ascii=False))
        return

    if not forest:
        console.print("[yellow]No notes found.[/]")
        return

    root = Tree(f"[bold]Decisions[/] ({len(forest)} tree(s))")
    for node in forest:
        _add_branch(root, node)
    console.print(root)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--challenge", default="", help="The design challenge being addressed")
@click.option("--consensus", type=click.Path(exists=True, dir_okay=False), default=None, help="File of consensus points")
@click.option("--simplify/--no-simplify", default=False, help="Also request shortened versions of each point")
@click.option("--save/--no-save", default=True, help="Store the analysis for later synthesis")
@click.pass_context
def critique(ctx, file, challenge, consensus, simplify, save):
    """Critique the design decisions in FILE (one per line) with Claude."""
    import anthropic

    from .critique.critic import Critic
    from .models import AnalysisRecord
    from .storage.analyses import AnalysisStore

    config = _get_config(ctx)
    decisions = _read_lines(file)
    if not decisions:
        console.print("[yellow]No decisions to critique.[/]")
        return

    try:
        critic = Critic(config)
        points = critic.generate_analysis(
            decisions,
            design_challenge=challenge,
            consensus_points=_read_lines(consensus) if consensus else (),
        )
        simplified = critic.simplify_points(points) if simplify else []
    except (ValueError, anthropic.APIError) as e:
        _fail(str(e))

    console.print(f"[green]✓ {len(points)} critique point(s)[/]")
    for i, point in enumerate(points, 1):
        console.print(f"  {i}. {point}")

    if save:
        record = AnalysisRecord(decisions=decisions, full=points, simplified=simplified, design_challenge=challenge)
        path = AnalysisStore(config["analyses_path"]).save(record)
        console.print(f"  [dim]Saved to {path}[/]")


@cli.command()
@click.option("--max-points", default=None, type=int, help="Maximum number of points to keep")
@click.pass_context
def synthesize(ctx, max_points):
    """Merge the points of all stored analyses into one concise list."""
    from .storage.analyses import AnalysisStore
    from .text.merge import get_merge_strategy

    config = _get_config(ctx)
    merge_cfg = config.get("merge", {})
    max_points = max_points or merge_cfg.get("max_points", 10)

    store = AnalysisStore(config["analyses_path"])
    points = store.synthesized_points(
        max_points=max_points,
        strategy=get_merge_strategy("jaccard", merge_cfg.get("jaccard_threshold")),
    )
    if not points:
        console.print("[yellow]No stored analyses. Run 'critiqueboard critique' first.[/]")
        return

    console.print(f"\n[bold]Synthesized points[/] ({len(points)})")
    for point in points:
        console.print(f"  • {point}")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--dialogue", type=click.Path(exists=True, dir_okay=False), default=None, help="File of thinking dialogue notes")
@click.pass_context
def themes(ctx, file, dialogue):
    """Generate design themes from proposals in FILE."""
    import anthropic

    from .critique.critic import Critic

    config = _get_config(ctx)
    try:
        critic = Critic(config)
        result = critic.generate_themes(_read_lines(file), _read_lines(dialogue) if dialogue else [])
    except (ValueError, RuntimeError, anthropic.APIError) as e:
        _fail(str(e))

    table = Table(title="Design Themes")
    table.add_column("#", style="dim", width=3)
    table.add_column("Theme", style="cyan")
    table.add_column("Color", style="green")
    for i, theme in enumerate(result, 1):
        table.add_row(str(i), theme.name, theme.color)
    console.print(table)


if __name__ == "__main__":
    cli()
