from __future__ import annotations

import re
from typing import Dict, List, Set

# Generator tags are written as "// +k8s:name=value[,value...]".
GEN_TAG_RE = re.compile(rb"//\s*\+k8s:([^\s=]+)=(\S+)\s*\n")


def _decode(raw: bytes) -> str:
	return raw.decode("utf-8", errors="replace")


def extract_tags(content: bytes, requested_tags: Set[str]) -> Dict[str, List[str]]:
	"""Return {tag name: values} for every requested generator tag in content.

	Values keep the order they appear in, both within one comma separated
	payload and across several tag comments.
	"""
	tags: Dict[str, List[str]] = {}
	for match in GEN_TAG_RE.finditer(content):
		tag = _decode(match.group(1))
		if tag not in requested_tags:
			continue
		values = _decode(match.group(2)).split(",")
		tags.setdefault(tag, []).extend(values)
	return tags
