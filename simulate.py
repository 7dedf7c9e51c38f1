"""
Simple simulation script.

Plays single-player games against a running server. X picks random empty
cells, O is the computer at the chosen difficulty.

Usage:
    python simulate.py [easy|medium|hard] [num_games]
"""

import requests
import random
import time
import sys

BASE_URL = "http://localhost:8000/api/v1"


def play_game(difficulty):
    """Play one game to the end. Returns the final game state, or None."""
    response = requests.post(
        f"{BASE_URL}/games",
        json={"mode": "single", "difficulty": difficulty}
    )
    if response.status_code != 200:
        print(f"Failed to create game: {response.text}")
        return None

    game = response.json()
    game_id = game["id"]

    while game["state"] != "finished":
        if game["computer_should_move"]:
            time.sleep(game["computer_move_delay_ms"] / 1000.0 / 10)
            response = requests.post(f"{BASE_URL}/games/{game_id}/computer-move")
        else:
            empty = [i for i, cell in enumerate(game["board"]) if cell == ""]
            response = requests.post(
                f"{BASE_URL}/games/{game_id}/move",
                json={"index": random.choice(empty)}
            )

        if response.status_code != 200:
            print(f"  Game {game_id}: move rejected: {response.json().get('detail')}")
            break
        game = response.json()

    requests.delete(f"{BASE_URL}/games/{game_id}")
    return game


def report(stats, difficulty):
    """Print the tallies. Returns the exit code."""
    print("\n=== Results ===")
    print(f"  X (random) wins: {stats['X']}")
    print(f"  O ({difficulty}) wins: {stats['O']}")
    print(f"  Draws: {stats['draw']}")

    if difficulty == "hard" and stats["X"] > 0:
        print("Hard computer lost a game!")
        return 1
    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    difficulty = argv[0] if len(argv) > 0 else "hard"
    NUM_GAMES = int(argv[1]) if len(argv) > 1 else 20

    print("=== TicTacToe Simulation ===\n")
    print(f"Playing {NUM_GAMES} games, random X vs {difficulty} O...")

    stats = {"X": 0, "O": 0, "draw": 0}

    for game_num in range(NUM_GAMES):
        game = play_game(difficulty)
        if game is None:
            continue

        if game["status"] == "win":
            stats[game["winner"]] += 1
            result = f"{game['winner']} wins (line {game['winning_line']})"
        elif game["status"] == "draw":
            stats["draw"] += 1
            result = "draw"
        else:
            result = "abandoned"

        print(f"  Game {game_num + 1} (ID: {game['id']}): {result} after {game['moves_count']} moves")

    return report(stats, difficulty)


if __name__ == "__main__":
    sys.exit(main())
