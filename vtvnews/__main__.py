"""Run the news API with uvicorn: python -m vtvnews."""

import os

import uvicorn


def main() -> None:
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("vtvnews.main:app", host=os.getenv("HOST", "127.0.0.1"), port=port)


if __name__ == "__main__":
    main()
