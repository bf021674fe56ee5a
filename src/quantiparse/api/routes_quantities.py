"""FastAPI router exposing quantity parsing."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from quantiparse.config import MAX_INPUT_LENGTH
from quantiparse.observability import log_event, truncate_input
from quantiparse.parser import ParseFailure, parse, to_canonical
from quantiparse.parser.tree import as_dict
from quantiparse.units.transform import TransformError, evaluate


router = APIRouter(prefix="/v1/quantities", tags=["quantities"])


class ParseReq(BaseModel):
    text: str = Field(..., min_length=1, max_length=MAX_INPUT_LENGTH, description="Quantity expression")
    evaluate: bool = Field(default=False, description="Also evaluate against the unit registry")


class MeasurementModel(BaseModel):
    magnitude: str
    unit: str
    si_magnitude: str
    si_unit: str


class ParseResp(BaseModel):
    ok: bool
    kind: str
    result: Dict[str, Any]
    canonical: str
    measurement: Optional[MeasurementModel] = None


class ParseErrorDetail(BaseModel):
    message: str
    position: int
    expected: List[str]


@router.post("/parse", response_model=ParseResp)
def parse_quantity(req: ParseReq) -> ParseResp:
    try:
        result = parse(req.text)
    except ParseFailure as exc:
        log_event("quantity.parse_failed", text=truncate_input(req.text), position=exc.position)
        detail = ParseErrorDetail(
            message=str(exc).splitlines()[0],
            position=exc.position,
            expected=list(exc.expected),
        )
        raise HTTPException(status_code=422, detail=detail.model_dump()) from exc

    measurement = None
    if req.evaluate:
        try:
            value = evaluate(result)
        except TransformError as exc:
            raise HTTPException(status_code=422, detail={"message": str(exc)}) from exc
        measurement = MeasurementModel(
            magnitude=str(value.magnitude),
            unit=value.unit_text,
            si_magnitude=str(value.to_si()),
            si_unit=value.si_unit_text,
        )

    log_event("quantity.parsed", text=truncate_input(req.text), kind=result.kind)
    return ParseResp(
        ok=True,
        kind=result.kind,
        result=as_dict(result),
        canonical=to_canonical(result),
        measurement=measurement,
    )
