"""Letter-pool solver web application — Flask backend."""
from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ninep.alphabet import InvalidCharacterError
from ninep.board import Board
from ninep.dictionary import load_default_tree
from ninep.settings import settings
from ninep.word_tree import WordTree

logger = logging.getLogger("ninep")


def create_app(tree: WordTree | None = None) -> Flask:
    """Build the app. Without *tree*, the configured word list loads on first use."""
    app = Flask(__name__)
    state: dict[str, WordTree | None] = {"tree": tree}

    def get_tree() -> WordTree:
        if state["tree"] is None:
            logger.info("Loading word list from %s", settings.WORD_LIST_PATH)
            state["tree"] = load_default_tree()
        return state["tree"]

    @app.route("/health")
    def health():
        loaded = state["tree"]
        return jsonify({
            "status": "ok",
            "word_count": len(loaded) if loaded is not None else None,
        })

    @app.route("/solve", methods=["POST"])
    def solve_route():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        letters = data.get("letters", "")
        if isinstance(letters, list):
            letters = "".join(str(ch) for ch in letters)
        letters = str(letters).strip().lower()
        if not letters:
            return jsonify({"error": "No letters provided"}), 400

        try:
            min_length = int(data.get("min_length", settings.MIN_WORD_LENGTH))
        except (TypeError, ValueError):
            return jsonify({"error": "min_length must be an integer"}), 400

        try:
            tree = get_tree()
        except FileNotFoundError as e:
            logger.error("Word list unavailable: %s", e)
            return jsonify({"error": str(e)}), 503

        try:
            board = Board(letters, tree, min_length=min_length)
        except InvalidCharacterError as e:
            return jsonify({"error": str(e), "char": e.char, "position": e.position}), 400

        words = board.solve()
        if settings.MAX_RESULTS > 0:
            words = words[:settings.MAX_RESULTS]
        logger.info("Board %s: %d words", board.letters, len(words))
        return jsonify({
            "letters": board.letters,
            "words": words,
            "word_count": len(words),
        })

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    create_app().run(port=settings.PORT)
