from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from iconforge.icons import service
from iconforge.icons.errors import InternalFailure, InvalidConfiguration, MissingInput, ModelCallFailed, UnknownPreset
from iconforge.icons.feedback import FeedbackSink, LoggingFeedbackSink
from iconforge.icons.pipeline import IconRenderer, OpenAIIconRenderer
from iconforge.icons.presets import DEFAULT_PRESET
from iconforge.logging_config import setup_logging

setup_logging()

app = FastAPI(title="Icon Forge API", docs_url="/docs", redoc_url=None)


def get_icon_renderer() -> IconRenderer:
    return OpenAIIconRenderer()


def get_feedback_sink() -> FeedbackSink:
    return LoggingFeedbackSink()


@app.exception_handler(InvalidConfiguration)
async def _invalid_configuration(request: Request, exc: InvalidConfiguration) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.error, "details": exc.details})


@app.exception_handler(UnknownPreset)
async def _unknown_preset(request: Request, exc: UnknownPreset) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid preset", "availablePresets": exc.available})


@app.exception_handler(MissingInput)
async def _missing_input(request: Request, exc: MissingInput) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(InternalFailure)
async def _internal_failure(request: Request, exc: InternalFailure) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": f"Failed to {exc.operation}", "message": exc.message})


@app.exception_handler(ModelCallFailed)
async def _model_call_failed(request: Request, exc: ModelCallFailed) -> JSONResponse:
    return JSONResponse(status_code=502, content={"error": "Icon model request failed", "message": exc.message})


class _CamelIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParseInputIn(_CamelIn):
    input: Any = None
    preset: str = DEFAULT_PRESET


class FeedbackIn(_CamelIn):
    prompt_id: Any = None
    icon_config: Any = Field(default=None, alias="config")
    rating: Any = None
    comments: Any = None
    generated_icon_url: Any = None


class SvgIn(_CamelIn):
    svg: str


class ExportReactIn(SvgIn):
    component_name: str = Field(default="GeneratedIcon", min_length=1, pattern=r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.post("/api/generate-prompt")
def generate_prompt(body: Any = Body(default=None)) -> dict[str, Any]:
    return service.generate_prompt(body)


@app.post("/api/generate-creative-prompt")
def generate_creative_prompt(body: Any = Body(default=None)) -> dict[str, Any]:
    return service.generate_creative_prompt(body)


@app.post("/api/parse-input")
def parse_input(body: ParseInputIn | None = None) -> dict[str, Any]:
    body = body or ParseInputIn()
    return service.parse_input(body.input, body.preset)


@app.get("/api/presets")
def presets() -> dict[str, Any]:
    return service.presets_catalog()


@app.post("/api/generate-variants")
def generate_variants(body: Any = Body(default=None)) -> dict[str, Any]:
    return service.generate_variants(body)


@app.post("/api/feedback")
def feedback(body: FeedbackIn, sink: FeedbackSink = Depends(get_feedback_sink)) -> dict[str, Any]:
    return service.submit_feedback(
        prompt_id=None if body.prompt_id is None else str(body.prompt_id),
        config=body.icon_config,
        rating=body.rating,
        comments=body.comments,
        generated_icon_url=body.generated_icon_url,
        sink=sink,
    )


@app.post("/api/validate-svg")
def validate_svg(body: SvgIn) -> list[dict[str, str]]:
    return service.validate_svg(body.svg)


@app.post("/api/export-react")
def export_react(body: ExportReactIn) -> dict[str, str]:
    return service.export_react(body.svg, body.component_name)


@app.post("/api/generate-icon")
def generate_icon(
    body: Any = Body(default=None),
    creative: bool = Query(default=False),
    renderer: IconRenderer = Depends(get_icon_renderer),
) -> dict[str, Any]:
    return service.generate_icon(body, renderer=renderer, creative=creative)
