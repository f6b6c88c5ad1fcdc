from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from codegen_tags.config import DEFAULT_CONFIG_FILE, load_config
from codegen_tags.errors import CodegenTagsError, ConfigError
from codegen_tags.generator import generate
from codegen_tags.model import GenerateResult, GeneratorConfig


app = FastAPI(title="Codegen Tags Generator")


class GenerateRequest(BaseModel):
	root_path: str
	config: Optional[GeneratorConfig] = None
	dry_run: bool = True


@app.post("/generate", response_model=GenerateResult)
def generate_bzl(req: GenerateRequest) -> GenerateResult:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	try:
		config = req.config or load_config(os.path.join(root, DEFAULT_CONFIG_FILE))
		return generate(config, root=root, dry_run=req.dry_run)
	except ConfigError as e:
		raise HTTPException(status_code=400, detail=str(e)) from e
	except CodegenTagsError as e:
		raise HTTPException(status_code=500, detail=str(e)) from e


def create_app() -> FastAPI:
	return app
