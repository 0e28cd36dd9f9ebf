"""Card Draw: dev launcher. Starts the API server."""

import argparse
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "13020"))


def main():
    parser = argparse.ArgumentParser(description="Card Draw dev launcher")
    parser.add_argument("--songs-dir", type=Path, default=None,
                        help="Game catalog directory (default: ./songs)")
    parser.add_argument("--demo", action="store_true",
                        help="Write demo game catalogs before starting")
    parser.add_argument("--reload", action="store_true",
                        help="Restart the server when source files change")
    args = parser.parse_args()

    # The app reads SONGS_DIR when uvicorn imports it
    if args.songs_dir:
        os.environ["SONGS_DIR"] = str(args.songs_dir.resolve())

    if args.demo:
        from backend.demo import create_demo_data
        from card_draw.library import GameLibrary
        songs_dir = args.songs_dir or Path(os.getenv("SONGS_DIR", str(ROOT / "songs")))
        create_demo_data(GameLibrary(songs_dir))

    print(f"Starting backend on http://localhost:{PORT} ...")
    uvicorn.run("backend.app:app", host=HOST, port=PORT, reload=args.reload)


if __name__ == "__main__":
    main()
