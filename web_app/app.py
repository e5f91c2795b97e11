import logging
import os
from typing import FrozenSet, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request # type: ignore
from fastapi.concurrency import run_in_threadpool # type: ignore
from fastapi.exceptions import RequestValidationError # type: ignore
from fastapi.staticfiles import StaticFiles # type: ignore
from pydantic import BaseModel, Field, ValidationError

from marshians_fn import config
from marshians_fn.dictionary import load_dictionary
from marshians_fn.sudoku import SudokuError, solve
from marshians_fn.words import words


# ============================================================
# Configuration & Logging
# ============================================================
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("marshians_web")

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# ============================================================
# Dictionary (loaded once, read-only afterwards)
# ============================================================
_dictionary: Optional[FrozenSet[str]] = None


def get_dictionary() -> FrozenSet[str]:
    global _dictionary
    if _dictionary is None:
        try:
            _dictionary = load_dictionary(config.DICTIONARY_PATH)
        except (OSError, ValueError) as e:
            logger.error("Dictionary unavailable: %s", e)
            raise HTTPException(status_code=503, detail="dictionary is not available")
    return _dictionary


# ============================================================
# FastAPI App
# ============================================================
app = FastAPI(title="marshians-fn")

logger.info("app.py loaded. PROJECT_ROOT=%s", PROJECT_ROOT)


@app.on_event("startup")
async def on_startup():
    logger.info("FastAPI startup event fired.")
    logger.info("DICTIONARY_PATH=%s, UI_DIR=%s", config.DICTIONARY_PATH, UI_DIR)
    # 辞書が無くても起動は続ける（letters-to-words だけ 503 になる）
    try:
        get_dictionary()
    except HTTPException:
        logger.warning("Starting without a dictionary.")


# ============================================================
# Pydantic Models
# ============================================================
class SudokuSolution(BaseModel):
    original: str
    solution: str


class LettersToWordsRequest(BaseModel):
    letters: str = Field(..., max_length=config.MAX_LETTERS)
    min: int = Field(config.DEFAULT_MIN_LETTERS, ge=0)


class HealthResponse(BaseModel):
    ok: bool


# ============================================================
# Health
# ============================================================
@app.get("/health", response_model=HealthResponse)
async def health():
    return {"ok": True}


# ============================================================
# API Endpoints
# ============================================================
@app.post("/api/sudoku-solver", response_model=SudokuSolution)
async def sudoku_solver(req: Request):
    """
    Body is the raw board string: 81 digits, '0' for empty cells.
    """
    raw = await req.body()
    try:
        board = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="board must be UTF-8 text")

    try:
        # 探索は CPU を使うので、イベントループを塞がないよう別スレッドで実行
        solution = await run_in_threadpool(solve, board)
    except SudokuError as e:
        logger.info("Sudoku rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Sudoku Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return {"original": board, "solution": solution}


@app.post("/api/letters-to-words", response_model=List[str])
async def letters_to_words(
    req: Request,
    dictionary: FrozenSet[str] = Depends(get_dictionary),
):
    """
    Body is JSON (`{"letters": "...", "min": 3}`) whatever the Content-Type;
    browsers posting a plain string send text/plain.
    """
    try:
        body = LettersToWordsRequest.model_validate_json(await req.body())
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))

    try:
        return await run_in_threadpool(words, dictionary, body.letters, body.min)
    except Exception as e:
        logger.error("Letters Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


# ============================================================
# Frontend (Static)
# ============================================================
UI_DIR = os.path.join(PROJECT_ROOT, config.UI_DIR)

# StaticFiles はディレクトリが存在しないと例外で落ちるため、存在するときだけ mount
if os.path.isdir(UI_DIR):
    app.mount("/", StaticFiles(directory=UI_DIR, html=True), name="ui")
    logger.info("Mounted ui static directory: %s", UI_DIR)
else:
    logger.warning("UI_DIR does not exist: %s (skip mounting static files)", UI_DIR)
