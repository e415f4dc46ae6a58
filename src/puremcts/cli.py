"""
Command-line interface for puremcts.

Commands:
- list-games: Show available games
- play: Play against the engine or another human
- recommend: Analyse a position and recommend a move
- arena: Pit the engine against a random or weaker opponent
- benchmark: Test MCTS performance
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import typer
from rich.table import Table

from .utils import Config, console, setup_logging

app = typer.Typer(
    name="puremcts",
    help="puremcts - Monte Carlo Tree Search for board games",
    no_args_is_help=True,
)


def load_config(config_path: Optional[Path]) -> Config:
    """Load config from YAML if given, then set up logging."""
    if config_path is not None:
        if not config_path.exists():
            console.print(f"[red]Error: config file {config_path} not found[/]")
            raise typer.Exit(1)
        config = Config.load(str(config_path))
    else:
        config = Config()

    setup_logging(config.log_level)
    return config


def resolve_game(name: str):
    from .games import get_game

    try:
        return get_game(name)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


def player_label(player) -> str:
    from .games.tictactoe import SYMBOLS

    return SYMBOLS[player.value]


@app.command("list-games")
def list_games_cmd() -> None:
    """List all available games."""
    from .games import list_games, get_game

    table = Table(title="Available Games")
    table.add_column("Name", style="cyan")
    table.add_column("Board", style="green")
    table.add_column("Moves", style="yellow")

    for name in list_games():
        spec = get_game(name).spec
        board_str = "x".join(str(d) for d in spec.board_shape)
        table.add_row(name, board_str, str(spec.num_moves))

    console.print(table)


@app.command()
def play(
    game_name: Optional[str] = typer.Option(None, "--game", "-g", help="Game to play"),
    opponent: Optional[str] = typer.Option(
        None, "--opponent", "-o", help="engine, or human for two players at one keyboard"
    ),
    difficulty: Optional[str] = typer.Option(
        None, "--difficulty", "-d", help="easy/medium/hard/impossible"
    ),
    human_first: Optional[bool] = typer.Option(
        None, "--first/--second", help="Human plays first (engine games)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Play against the engine, or against another human."""
    from .exceptions import CellOccupiedError, OutOfBoundsError
    from .mcts import MCTS
    from .play import Difficulty, get_difficulty_config
    from .utils import make_rng, print_board

    config = load_config(config_path)
    game_name = game_name or config.game
    game = resolve_game(game_name)
    opponent = (opponent or config.play.opponent).lower()
    human_first = config.play.human_first if human_first is None else human_first
    seed = config.seed if seed is None else seed

    state = game.initial_state()

    if opponent == "human":
        humans = {game.current_mover(state), game.current_mover(state).opponent}
        console.print(f"\n[bold]Playing {game_name}, two players[/]\n")
    elif opponent == "engine":
        try:
            diff = Difficulty((difficulty or config.play.difficulty).lower())
        except ValueError:
            console.print("[red]Invalid difficulty. Choose: easy, medium, hard, impossible[/]")
            raise typer.Exit(1)

        diff_config = get_difficulty_config(diff, game.spec)
        console.print(
            f"[blue]Difficulty: {diff_config.name} ({diff_config.iterations} iterations)[/]"
        )
        mcts = MCTS(game, exploration=config.mcts.exploration, rng=make_rng(seed))

        human = game.current_mover(state) if human_first else game.current_mover(state).opponent
        humans = {human}
        console.print(f"\n[bold]Playing {game_name}[/]")
        console.print(f"You are {player_label(human)}, AI is {player_label(human.opponent)}\n")
    else:
        console.print("[red]Invalid opponent. Choose: engine, human[/]")
        raise typer.Exit(1)

    while True:
        print_board(game.render(state), title=game_name)

        result = game.classify(state)
        if result.is_terminal:
            if result.winner is None:
                console.print("[yellow]Tie![/]")
            elif opponent == "human":
                console.print(f"[green]{player_label(result.winner)} wins![/]")
            elif result.winner in humans:
                console.print("[green]You win![/]")
            else:
                console.print("[red]AI wins![/]")
            console.print("Game Over!")
            break

        mover = game.current_mover(state)
        if mover in humans:
            text = typer.prompt(
                f"Select cell for player {player_label(mover)} in format row_index, col_index"
            )
            try:
                state = game.apply(state, game.parse_move(text))
            except OutOfBoundsError:
                console.print("[red]Index out of bound. Try again.[/]")
            except CellOccupiedError:
                console.print("[red]Cannot mark a non empty cell. Try again.[/]")
            except ValueError as e:
                console.print(f"[red]{e}[/]")
        else:
            console.print("[cyan]AI thinking...[/]")
            tree = mcts.search(
                state,
                iterations=diff_config.iterations,
                time_budget=config.mcts.time_budget,
            )
            move = mcts.select_move(tree, diff_config.temperature)
            state = game.apply(state, move)
            console.print(f"AI played: {move}\n")


@app.command()
def recommend(
    position: str = typer.Argument(
        ..., help="Tic-Tac-Toe position, 9 cells of X/O/. row by row (e.g. 'X.O|.X.|..O')"
    ),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="MCTS iterations"),
    time_budget: Optional[float] = typer.Option(
        None, "--time", "-t", help="Search time budget in seconds"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Search a position and recommend a move."""
    from .games.tictactoe import TicTacToeGame, state_from_string
    from .mcts import MCTS
    from .utils import make_rng, print_board, print_root_stats

    config = load_config(config_path)
    game = TicTacToeGame()

    try:
        state = state_from_string(position)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)

    print_board(game.render(state), title="Position")

    if game.is_terminal(state):
        console.print(f"[yellow]Game is over: {game.classify(state).value}[/]")
        raise typer.Exit(1)

    if iterations is None and time_budget is None:
        iterations = config.mcts.iterations
        time_budget = config.mcts.time_budget

    if iterations is not None and iterations < 1:
        console.print("[red]Error: --iterations must be at least 1[/]")
        raise typer.Exit(1)

    mcts = MCTS(
        game,
        exploration=config.mcts.exploration,
        rng=make_rng(config.seed if seed is None else seed),
    )
    tree = mcts.search(state, iterations=iterations, time_budget=time_budget)
    move = mcts.recommend_move(tree)

    print_root_stats(tree, best_move=move)
    console.print(
        f"[bold green]Recommended move for {player_label(game.current_mover(state))}: {move}[/]"
    )


@app.command()
def arena(
    num_games: Optional[int] = typer.Option(None, "--games", "-n", help="Number of games"),
    iterations: Optional[int] = typer.Option(
        None, "--iterations", "-i", help="Engine iterations per move"
    ),
    opponent: Optional[str] = typer.Option(None, "--opponent", "-o", help="random or mcts"),
    opponent_iterations: Optional[int] = typer.Option(
        None, "--opponent-iterations", help="Opponent iterations per move (mcts opponent)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Evaluate the engine against an opponent."""
    import numpy as np
    from .eval import Arena, mcts_agent, random_agent
    from .utils import create_progress, print_config

    config = load_config(config_path)
    game = resolve_game(config.game)

    # Command-line options override the config file
    if num_games is not None:
        config.arena.num_games = num_games
    if iterations is not None:
        config.mcts.iterations = iterations
    if opponent is not None:
        config.arena.opponent = opponent
    if opponent_iterations is not None:
        config.arena.opponent_iterations = opponent_iterations
    config.seed = config.seed if seed is None else seed
    print_config(config)

    num_games = config.arena.num_games
    iterations = config.mcts.iterations
    opponent = config.arena.opponent.lower()
    opponent_iterations = config.arena.opponent_iterations

    if num_games < 0 or iterations < 1 or opponent_iterations < 1:
        console.print("[red]Error: games must be non-negative and iterations at least 1[/]")
        raise typer.Exit(1)

    candidate_seq, opponent_seq = np.random.SeedSequence(config.seed).spawn(2)
    candidate = mcts_agent(
        game,
        iterations,
        exploration=config.mcts.exploration,
        rng=np.random.default_rng(candidate_seq),
        time_budget=config.mcts.time_budget,
    )

    if opponent == "random":
        rival = random_agent(np.random.default_rng(opponent_seq))
        rival_name = "random"
    elif opponent == "mcts":
        rival = mcts_agent(
            game,
            opponent_iterations,
            exploration=config.mcts.exploration,
            rng=np.random.default_rng(opponent_seq),
        )
        rival_name = f"mcts({opponent_iterations})"
    else:
        console.print("[red]Invalid opponent. Choose: random, mcts[/]")
        raise typer.Exit(1)

    console.print(f"[blue]mcts({iterations}) vs {rival_name}, {num_games} games[/]")

    with create_progress() as progress:
        task = progress.add_task("Arena", total=num_games)

        def callback(n: int, outcome: str) -> None:
            progress.update(task, completed=n, description=f"Arena [{outcome}]")

        result = Arena(game).evaluate(candidate, rival, num_games, callback)

    table = Table(title="Arena Results")
    table.add_column("Wins", style="green", justify="right")
    table.add_column("Draws", style="yellow", justify="right")
    table.add_column("Losses", style="red", justify="right")
    table.add_column("Score", justify="right")
    table.add_row(
        str(result.wins),
        str(result.draws),
        str(result.losses),
        f"{result.score * 100:.1f}%",
    )
    console.print(table)


@app.command()
def benchmark(
    iterations: int = typer.Option(1000, "--iterations", "-n", help="Iterations per search"),
    runs: int = typer.Option(5, "--runs", "-r", help="Number of searches"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Benchmark MCTS performance."""
    import time
    from .games.tictactoe import TicTacToeGame
    from .mcts import MCTS
    from .utils import make_rng

    game = TicTacToeGame()
    mcts = MCTS(game, rng=make_rng(seed))
    state = game.initial_state()

    console.print(f"[blue]Benchmarking tictactoe, {iterations} iterations x {runs} runs[/]")

    start = time.time()
    total_nodes = 0
    for i in range(runs):
        run_start = time.time()
        tree = mcts.search(state, iterations=iterations)
        total_nodes += len(tree)
        console.print(
            f"  Run {i+1}: {time.time() - run_start:.2f}s, {len(tree)} nodes, "
            f"best move {mcts.recommend_move(tree)}"
        )
    elapsed = time.time() - start

    console.print("\n[green]Results:[/]")
    console.print(f"  Total time: {elapsed:.2f}s")
    console.print(f"  Iterations/sec: {iterations * runs / elapsed:.0f}")
    console.print(f"  Nodes/sec: {total_nodes / elapsed:.0f}")


if __name__ == "__main__":
    app()
