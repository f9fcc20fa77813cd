import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from wordcheck.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordcheck")


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        logger.setLevel(settings.LOG_LEVEL.upper())
        logger.info(
            "Word checker ready (max_board_cells=%d, max_word_length=%d, normalize_case=%s)",
            settings.MAX_BOARD_CELLS, settings.MAX_WORD_LENGTH, settings.NORMALIZE_CASE,
        )
        yield

    application = FastAPI(title="Word Grid Checker", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok"}

    @application.post("/check")
    async def check_words(request: Request):
        from wordcheck.board import parse_board, format_board
        from wordcheck.metrics import StageTimer
        from wordcheck.solver import InvalidGridError, check

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        if "board" not in body:
            raise HTTPException(400, "Missing 'board'")

        words = _request_words(body)

        timer = StageTimer()

        with timer.stage("parse"):
            try:
                board = parse_board(body["board"], settings.NORMALIZE_CASE)
            except InvalidGridError as e:
                raise HTTPException(400, f"Invalid board: {e}")

        rows, cols = len(board), len(board[0])
        if rows * cols > settings.MAX_BOARD_CELLS:
            raise HTTPException(413, f"Board too large ({rows}x{cols}, max {settings.MAX_BOARD_CELLS} cells)")

        board_str = format_board(board)
        logger.info("Board %dx%d: %s", rows, cols, board_str)

        results: dict[str, bool] = {}
        for word in words:
            if settings.NORMALIZE_CASE:
                word = word.upper()
            with timer.stage("check"):
                results[word] = check(board, word)

        found_count = sum(results.values())
        logger.info("Checked %d words, %d found", len(results), found_count)
        if settings.DEBUG:
            logger.info("Results: %s", results)

        return JSONResponse({
            "board": board,
            "rows": rows,
            "cols": cols,
            "results": results,
            "found_count": found_count,
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordcheck.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordcheck.settings import update_settings, get_editable_settings
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        errors = update_settings(settings, **body)
        if "LOG_LEVEL" in body and "LOG_LEVEL" not in errors:
            logger.setLevel(settings.LOG_LEVEL.upper())
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def _request_words(body: dict) -> list[str]:
    """Pull the word list out of a /check body ("word" or "words")."""
    if "words" in body:
        words = body["words"]
        if not isinstance(words, list):
            raise HTTPException(400, "'words' must be a list of strings")
    elif "word" in body:
        words = [body["word"]]
    else:
        raise HTTPException(400, "Missing 'word' or 'words'")

    if not words:
        raise HTTPException(400, "No words to check")
    if len(words) > settings.MAX_WORDS_PER_REQUEST:
        raise HTTPException(413, f"Too many words (max {settings.MAX_WORDS_PER_REQUEST})")
    for w in words:
        if not isinstance(w, str):
            raise HTTPException(400, f"Words must be strings, got: {w!r}")
        if len(w) > settings.MAX_WORD_LENGTH:
            raise HTTPException(413, f"Word too long (max {settings.MAX_WORD_LENGTH} characters)")
    return words


def main():
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


app = create_app()


if __name__ == "__main__":
    main()
