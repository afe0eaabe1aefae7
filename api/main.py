"""
FastAPI backend for the ABA bank file generator.
Provides REST API endpoints to generate, validate and parse ABA files.
"""

import logging
from pathlib import Path
from typing import List, Optional, Dict, Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import app_config
from errors import (
    InvalidArgumentException,
    LengthMismatchesException,
    ParserException,
    ValidationFailedException,
)
from generator import Generator, build_file_total_record
from models import DescriptiveRecord, FileTotalRecord, Transaction
from parsing import AbaParser

# Configure logging
logging.basicConfig(
    level=getattr(logging, app_config.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="ABA Bank File API",
    description="API for generating, validating and parsing ABA direct entry files",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class FileRequest(BaseModel):
    descriptive_record: Dict[str, Optional[Any]]
    transactions: List[Dict[str, Optional[Any]]] = Field(default_factory=list)
    file_total_record: Optional[Dict[str, Optional[Any]]] = None
    calculate_totals: bool = False


class ValidationResponse(BaseModel):
    valid: bool
    errors: List[Dict[str, Optional[str]]] = []


class ParseRequest(BaseModel):
    contents: str


class ParseResponse(BaseModel):
    descriptive_record: Dict[str, Optional[str]]
    transactions: List[Dict[str, Optional[str]]]
    file_total_record: Optional[Dict[str, Optional[str]]] = None


def _build_generator(request: FileRequest) -> Generator:
    """Turn a request body into a Generator, mapping misuse to HTTP 400."""
    if len(request.transactions) > app_config.max_transactions:
        raise HTTPException(
            status_code=400,
            detail=f"Too many transactions: {len(request.transactions)} (max {app_config.max_transactions})"
        )

    try:
        descriptive = DescriptiveRecord(request.descriptive_record)
        transactions = [Transaction(t) for t in request.transactions]

        if request.file_total_record is not None:
            return Generator(descriptive, transactions, FileTotalRecord(request.file_total_record))

        generator = Generator(descriptive, transactions)
        # Totals are derived only once every record passes its rules
        if request.calculate_totals and not generator.validate():
            generator = Generator(descriptive, transactions, build_file_total_record(transactions))

        return generator
    except InvalidArgumentException as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "ABA Bank File API",
        "version": "1.0.0"
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "max_transactions": app_config.max_transactions,
    }


@app.post("/generate", response_class=PlainTextResponse)
async def generate_file(request: FileRequest) -> PlainTextResponse:
    """
    Generate ABA file contents.

    Returns:
        The file contents as plain text
    """
    generator = _build_generator(request)

    try:
        contents = generator.get_contents()
    except ValidationFailedException as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "errors": e.to_list()}
        )
    except LengthMismatchesException as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "mismatches": e.mismatches}
        )

    logger.info(f"Generated ABA file with {len(generator.transactions)} transaction(s)")
    return PlainTextResponse(contents)


@app.post("/validate")
async def validate_file(request: FileRequest) -> ValidationResponse:
    """Validate records without rendering them."""
    generator = _build_generator(request)
    errors = generator.validate()

    return ValidationResponse(
        valid=not errors,
        errors=[error.to_dict() for error in errors]
    )


@app.post("/parse")
async def parse_file(request: ParseRequest) -> ParseResponse:
    """Decode ABA contents into attribute maps."""
    parser = AbaParser(request.contents)

    try:
        parsed = parser.parse()
    except ParserException as e:
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "line": e.line_number}
        )

    total = parsed.file_total_record
    return ParseResponse(
        descriptive_record=parsed.descriptive_record.get_attributes(),
        transactions=[t.get_attributes() for t in parsed.transactions],
        file_total_record=total.get_attributes() if total is not None else None,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=app_config.api_host,
        port=app_config.api_port,
        reload=True
    )
