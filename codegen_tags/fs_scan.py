from __future__ import annotations

import logging
import os
import re
from typing import Dict, Iterable, Set

from .errors import ReadError, TraversalError
from .extract import extract_tags

logger = logging.getLogger(__name__)

# {tag name: {value: {packages}}}
AggregateIndex = Dict[str, Dict[str, Set[str]]]


def to_package_name(root: str, dirpath: str) -> str:
	rel_path = os.path.relpath(dirpath, root)
	return rel_path.replace(os.sep, "/")


def is_skipped(package: str, skip_patterns: Iterable[re.Pattern[str]]) -> bool:
	return any(pattern.search(package) for pattern in skip_patterns)


def _raise_traversal_error(err: OSError) -> None:
	raise TraversalError(err.filename or "", err) from err


def find_generator_tags(
	root: str,
	requested_tags: Set[str],
	skip_patterns: Iterable[re.Pattern[str]] = (),
	source_suffix: str = ".go",
	test_suffix: str = "_test.go",
) -> AggregateIndex:
	"""Find every package under root carrying a requested generator tag.

	Symlinked directories are not descended into; symlinked files are read
	through the link. A directory whose root-relative path matches one of
	skip_patterns is pruned along with everything beneath it. Any error aborts
	the walk.
	"""
	skip_patterns = list(skip_patterns)
	tags_values_pkgs: AggregateIndex = {}

	for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
		pkg = to_package_name(root, dirpath)
		if is_skipped(pkg, skip_patterns):
			logger.debug("skipping %s", pkg)
			dirnames[:] = []
			continue
		dirnames.sort()

		for filename in sorted(filenames):
			if not filename.endswith(source_suffix) or filename.endswith(test_suffix):
				continue
			path = os.path.join(dirpath, filename)

			try:
				with open(path, "rb") as fh:
					content = fh.read()
			except OSError as err:
				raise ReadError(path, err) from err

			logger.debug("scanning %s", path)
			for tag, values in extract_tags(content, requested_tags).items():
				values_pkgs = tags_values_pkgs.setdefault(tag, {})
				for value in values:
					# Several files of one package may carry the same tag and value.
					values_pkgs.setdefault(value, set()).add(pkg)

	return tags_values_pkgs
