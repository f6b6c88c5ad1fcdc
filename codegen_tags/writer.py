from __future__ import annotations

import difflib
import logging
import os
import sys
import tempfile

from .errors import WriteError

logger = logging.getLogger(__name__)


def print_unified_diff(path: str, orig: bytes, out: bytes) -> None:
	diff = difflib.unified_diff(
		orig.decode("utf-8", errors="replace").splitlines(keepends=True),
		out.decode("utf-8", errors="replace").splitlines(keepends=True),
		fromfile=path,
		tofile=path,
	)
	sys.stdout.writelines(diff)


def atomic_write(path: str, data: bytes) -> None:
	directory = os.path.dirname(os.path.abspath(path))
	fd, tmp_path = tempfile.mkstemp(prefix=".codegen-tags-", dir=directory)
	try:
		with os.fdopen(fd, "wb") as fh:
			fh.write(data)
		os.chmod(tmp_path, 0o644)
		os.replace(tmp_path, path)
	except BaseException:
		if os.path.exists(tmp_path):
			os.unlink(tmp_path)
		raise


def write_file(
	path: str,
	content: str,
	boilerplate: bytes,
	exists: bool,
	dry_run: bool,
	print_diff: bool = False,
) -> bool:
	"""Write boilerplate followed by content to path if it differs from disk.

	Returns True when the file changed, or would have changed in dry-run mode.
	"""
	out = boilerplate + content.encode("utf-8")
	if exists:
		try:
			with open(path, "rb") as fh:
				orig = fh.read()
		except OSError as e:
			raise WriteError(path, e) from e
		if orig == out:
			return False
		if print_diff:
			print_unified_diff(path, orig, out)

	if dry_run:
		logger.info("DRY-RUN: wrote %s", path)
		return True

	try:
		atomic_write(path, out)
	except OSError as e:
		raise WriteError(path, e) from e
	logger.info("wrote %s", path)
	return True
