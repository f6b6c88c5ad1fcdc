import os
import re

import pytest

from codegen_tags import fs_scan
from codegen_tags.errors import ReadError, TraversalError
from codegen_tags.fs_scan import find_generator_tags


def write(root, rel_path, text):
	p = root / rel_path
	p.parent.mkdir(parents=True, exist_ok=True)
	p.write_text(text)
	return p


def test_walk_aggregates_packages(tmp_path):
	write(tmp_path, "pkg/a/types.go", "// +k8s:client-gen=true\npackage a\n")
	write(tmp_path, "pkg/b/types.go", "// +k8s:client-gen=true,listers\npackage b\n")
	write(tmp_path, "root.go", "// +k8s:client-gen=listers\npackage main\n")

	index = find_generator_tags(str(tmp_path), {"client-gen"})
	assert index == {
		"client-gen": {
			"true": {"pkg/a", "pkg/b"},
			"listers": {".", "pkg/b"},
		}
	}


def test_walk_dedupes_files_in_same_package(tmp_path):
	write(tmp_path, "pkg/a/types.go", "// +k8s:deepcopy-gen=package\npackage a\n")
	write(tmp_path, "pkg/a/doc.go", "// +k8s:deepcopy-gen=package\npackage a\n")

	index = find_generator_tags(str(tmp_path), {"deepcopy-gen"})
	assert index == {"deepcopy-gen": {"package": {"pkg/a"}}}


def test_walk_skips_tests_and_other_suffixes(tmp_path):
	write(tmp_path, "pkg/a/types_test.go", "// +k8s:client-gen=true\npackage a\n")
	write(tmp_path, "pkg/a/notes.txt", "// +k8s:client-gen=true\n")
	write(tmp_path, "pkg/a/types.go.orig", "// +k8s:client-gen=true\n")

	assert find_generator_tags(str(tmp_path), {"client-gen"}) == {}


def test_walk_prunes_skipped_subtree(tmp_path):
	write(tmp_path, "vendor/k8s.io/api/types.go", "// +k8s:client-gen=vendored\npackage api\n")
	write(tmp_path, "vendor/x.go", "// +k8s:client-gen=vendored\npackage vendor\n")
	write(tmp_path, "pkg/a/types.go", "// +k8s:client-gen=true\npackage a\n")

	index = find_generator_tags(str(tmp_path), {"client-gen"}, [re.compile(r"^vendor$")])
	assert index == {"client-gen": {"true": {"pkg/a"}}}


def test_walk_never_reads_beneath_skipped_dir(tmp_path, monkeypatch):
	write(tmp_path, "third_party/deep/nested/x.go", "// +k8s:client-gen=hidden\npackage x\n")
	write(tmp_path, "pkg/a/types.go", "// +k8s:client-gen=true\npackage a\n")
	opened = []
	real_open = open

	def tracking_open(path, *args, **kwargs):
		opened.append(os.fspath(path))
		return real_open(path, *args, **kwargs)

	monkeypatch.setattr(fs_scan, "open", tracking_open, raising=False)
	index = find_generator_tags(str(tmp_path), {"client-gen"}, [re.compile(r"third_party")])
	assert index == {"client-gen": {"true": {"pkg/a"}}}
	assert not any("third_party" in p for p in opened)


def test_walk_reads_symlinked_files_but_not_symlinked_dirs(tmp_path):
	outside = tmp_path / "outside"
	write(outside, "ext/types.go", "// +k8s:client-gen=linked\npackage ext\n")
	root = tmp_path / "root"
	write(root, "pkg/a/types.go", "// +k8s:client-gen=true\npackage a\n")
	os.symlink(outside / "ext", root / "pkg" / "ext")
	os.symlink(outside / "ext" / "types.go", root / "pkg" / "a" / "linked.go")

	index = find_generator_tags(str(root), {"client-gen"})
	assert index == {"client-gen": {"true": {"pkg/a"}, "linked": {"pkg/a"}}}


def test_walk_missing_root_is_fatal(tmp_path):
	with pytest.raises(TraversalError):
		find_generator_tags(str(tmp_path / "missing"), {"client-gen"})


def test_walk_read_error_is_fatal(tmp_path, monkeypatch):
	write(tmp_path, "pkg/a/types.go", "// +k8s:client-gen=true\npackage a\n")

	def failing_open(path, *args, **kwargs):
		raise PermissionError(13, "Permission denied", path)

	monkeypatch.setattr(fs_scan, "open", failing_open, raising=False)
	with pytest.raises(ReadError) as excinfo:
		find_generator_tags(str(tmp_path), {"client-gen"})
	assert excinfo.value.path.endswith("types.go")
	assert isinstance(excinfo.value.__cause__, PermissionError)
