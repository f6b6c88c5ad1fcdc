from __future__ import annotations

import json
from typing import Any, List

from pydantic import BaseModel

from .flatten import FlattenedIndex

INDENT = "    "

HEADER = [
	"#################################################",
	"# # # # # # # # # # # # # # # # # # # # # # # # #",
	"This file is autogenerated by codegen-tags. DO NOT EDIT.",
	"# # # # # # # # # # # # # # # # # # # # # # # # #",
	"#################################################",
	"",
]


class Assignment(BaseModel):
	name: str
	comment: str
	value: Any


class GeneratedDocument(BaseModel):
	header: List[str] = []
	statements: List[Assignment] = []


def build_document(go_prefix: str, tags: List[str], tags_values_pkgs: FlattenedIndex) -> GeneratedDocument:
	return GeneratedDocument(
		header=list(HEADER),
		statements=[
			Assignment(
				name="go_prefix",
				comment="The go prefix passed to codegen-tags",
				value=go_prefix,
			),
			Assignment(
				name="configured_tags",
				comment="The list of codegen tags codegen-tags is configured to find",
				value=list(tags),
			),
			Assignment(
				name="tags_values_pkgs",
				comment="tags_values_pkgs is a dictionary mapping {k8s build tag: {tag value: [pkgs including that tag:value]}}",
				value=tags_values_pkgs,
			),
		],
	)


def _comment(text: str) -> str:
	return ("# " + text).rstrip()


def format_value(value: Any, depth: int = 0) -> str:
	"""Render a str, list or dict as a Starlark literal.

	Non-empty collections get one element per line with a trailing comma.
	"""
	if isinstance(value, str):
		return json.dumps(value, ensure_ascii=False)
	if isinstance(value, (list, tuple)):
		if not value:
			return "[]"
		inner = INDENT * (depth + 1)
		items = [f"{inner}{format_value(v, depth + 1)},\n" for v in value]
		return "[\n" + "".join(items) + INDENT * depth + "]"
	if isinstance(value, dict):
		if not value:
			return "{}"
		inner = INDENT * (depth + 1)
		items = [
			f"{inner}{format_value(str(k))}: {format_value(v, depth + 1)},\n" for k, v in value.items()
		]
		return "{\n" + "".join(items) + INDENT * depth + "}"
	raise TypeError(f"cannot format {type(value).__name__} as a Starlark literal")


def format_document(doc: GeneratedDocument) -> str:
	blocks: List[str] = []
	if doc.header:
		blocks.append("\n".join(_comment(line) for line in doc.header))
	for stmt in doc.statements:
		blocks.append(f"{_comment(stmt.comment)}\n{stmt.name} = {format_value(stmt.value)}")
	return "\n\n".join(blocks) + "\n"
