#!/usr/bin/env python3
"""
Minimal text client for playing Monopoly locally.

Renders snapshots to the terminal and drives turns through the same
engine the sync server uses. Useful for eyeballing the rules without
a GUI or a network connection.
"""

import argparse
import logging
from typing import List, Optional

from monopoly.config import GameConfig
from monopoly.engine import LandingOutcome, TurnResult, take_turn
from monopoly.state import GameStateStore, Snapshot


def print_game_state(store: GameStateStore, snap: Snapshot, turn: int) -> None:
    """Print current game state."""
    print("\n" + "=" * 60)
    print(f"TURN {turn}")
    print("=" * 60)

    for idx, player in enumerate(snap.players):
        marker = ">" if idx == snap.current_player_index else " "
        space = store.board.get_space(player.position)
        piece = f" [{player.piece}]" if player.piece else ""
        print(
            f"{marker} {player.name}{piece}: ${player.balance} | "
            f"{len(player.properties)} properties | at {space.name}"
        )


def describe_turn(store: GameStateStore, result: TurnResult) -> str:
    space = store.board.get_space(result.landing.position).name
    text = f"{result.player} rolled {result.dice[0]}+{result.dice[1]} and landed on {space}"
    outcome = result.outcome
    if outcome == LandingOutcome.PURCHASED:
        text += f", bought it for ${result.landing.amount}"
    elif outcome == LandingOutcome.PURCHASE_SKIPPED_INSUFFICIENT_FUNDS:
        text += f", cannot afford ${result.landing.amount}"
    elif outcome == LandingOutcome.RENT_PAID:
        text += f", paid ${result.landing.amount} rent to {result.landing.counterparty}"
    if result.card is not None:
        text += f" | card: {result.card.description}"
    return text


def simulate_game(
    player_names: List[str],
    turns: int = 20,
    seed: Optional[int] = None,
    draw_cards: bool = False,
    verbose: bool = True,
) -> GameStateStore:
    """
    Play a fixed number of turns locally.

    Args:
        player_names: roster in turn order
        turns: number of turns to play
        seed: random seed for reproducibility
        draw_cards: enable Chance / Community Chest cards
        verbose: whether to print every turn
    """
    config = GameConfig(player_names=player_names, max_players=max(8, len(player_names)), seed=seed, draw_cards=draw_cards)
    store = GameStateStore(config)

    if verbose:
        print(f"Starting game with {len(player_names)} players")
        print(f"Seed: {seed}")

    for turn in range(turns):
        result = take_turn(store)
        if verbose:
            print(describe_turn(store, result))
            if (turn + 1) % len(player_names) == 0:
                print_game_state(store, result.snapshot, turn + 1)

    if verbose:
        print("\nFinal Standings:")
        for player in sorted(store.snapshot().players, key=lambda p: p.balance, reverse=True):
            owned = ", ".join(p.name for p in player.properties) or "nothing"
            print(f"  {player.name}: ${player.balance} (owns {owned})")

    return store


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(description="Play Monopoly turns locally")
    parser.add_argument(
        "--players",
        nargs="+",
        default=["Player 1", "Player 2"],
        help="Player names in turn order",
    )
    parser.add_argument("--turns", type=int, default=20, help="Number of turns to play")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--cards", action="store_true", help="Draw Chance / Community Chest cards")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    args = parser.parse_args()
    if len(set(args.players)) != len(args.players):
        parser.error("--players names must be unique")
    logging.basicConfig(level=args.log_level.upper())

    simulate_game(
        player_names=args.players,
        turns=args.turns,
        seed=args.seed,
        draw_cards=args.cards,
        verbose=not args.quiet,
    )


if __name__ == "__main__":
    main()
