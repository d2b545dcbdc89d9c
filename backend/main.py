"""AI citation checker API – FastAPI app and endpoints."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import CORS_ALLOW_ORIGINS, LOG_LEVEL
from engine import analyze_url
from errors import FetchError, ValidationError
from models import CRITERIA_ORDER
from rules import CRITERION_DESCRIPTIONS, CRITERION_RULES, RESEARCH_INSIGHTS
from schemas import AnalyzeRequest, AnalyzeResponse, CriterionInfo, ErrorResponse, ResearchResponse

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to analyze the webpage. Please check the URL and try again."

app = FastAPI(
    title="AI Citation Checker API",
    description="Heuristic score of how likely AI assistants are to cite a webpage",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error("URL is required", 400)


@app.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(body: AnalyzeRequest):
    """
    Pipeline: validate URL -> fetch page -> parse -> score ten criteria -> return.
    """
    try:
        result = analyze_url(body.url)
    except ValidationError as exc:
        return _error(str(exc), 400)
    except FetchError as exc:
        logger.warning("Analysis failed for %s: %s", body.url, exc)
        return _error(GENERIC_FAILURE, 500)
    except Exception:
        logger.exception("Unexpected analysis error for %s", body.url)
        return _error(GENERIC_FAILURE, 500)

    return AnalyzeResponse.from_result(result)


@app.get("/research", response_model=ResearchResponse)
def research() -> ResearchResponse:
    """Static notes on what AI systems favour when citing sources."""
    return ResearchResponse(
        research_insights=list(RESEARCH_INSIGHTS),
        criteria=[
            CriterionInfo(
                name=name,
                max_score=CRITERION_RULES[name].max_score,
                description=CRITERION_DESCRIPTIONS[name],
            )
            for name in CRITERIA_ORDER
        ],
    )


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}
