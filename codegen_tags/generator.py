"""The generation pass: walk the tree, flatten the index and write the bzl file.

Every non-test source file under the root is read and searched for
"+k8s:name=value" tags. Only the tags listed in the config's codegen_tags are
kept. If a boilerplate file is configured its contents head the generated
file.
"""

from __future__ import annotations

import logging
import os

from .bzl import build_document, format_document
from .errors import BoilerplateError, StatError
from .flatten import flatten
from .fs_scan import find_generator_tags
from .model import GenerateResult, GeneratorConfig
from .writer import write_file

logger = logging.getLogger(__name__)


def _resolve(root: str, path: str) -> str:
	return path if os.path.isabs(path) else os.path.normpath(os.path.join(root, path))


def read_boilerplate(path: str) -> bytes:
	try:
		with open(path, "rb") as fh:
			return fh.read()
	except OSError as e:
		raise BoilerplateError(path, e) from e


def file_exists(path: str) -> bool:
	try:
		os.stat(path)
	except FileNotFoundError:
		return False
	except OSError as e:
		raise StatError(path, e) from e
	return True


def generate(
	config: GeneratorConfig,
	root: str = ".",
	dry_run: bool = False,
	print_diff: bool = False,
) -> GenerateResult:
	if not config.codegen_bzl_file:
		logger.debug("no codegen_bzl_file configured, nothing to generate")
		return GenerateResult(path="", changed=False, dry_run=dry_run)

	tags_values_pkgs = find_generator_tags(
		root,
		set(config.codegen_tags),
		config.skip_patterns(),
		source_suffix=config.source_suffix,
		test_suffix=config.test_suffix,
	)
	flattened = flatten(tags_values_pkgs)
	content = format_document(build_document(config.go_prefix, config.codegen_tags, flattened))

	boilerplate = b""
	if config.codegen_boilerplate_file:
		boilerplate = read_boilerplate(_resolve(root, config.codegen_boilerplate_file))

	path = _resolve(root, config.codegen_bzl_file)
	changed = write_file(path, content, boilerplate, file_exists(path), dry_run, print_diff)
	return GenerateResult(path=path, changed=changed, dry_run=dry_run, tags_values_pkgs=flattened)
