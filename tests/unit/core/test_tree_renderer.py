from __future__ import annotations

"""
Unit tests for the Tree Renderer.
"""

from nospace.core.parser import parse_transcript
from nospace.core.tree_renderer import render_tree


def test_render_reference_tree(example_transcript):
    lines = render_tree(parse_transcript(example_transcript))

    assert lines == [
        "/ (dir, size=48381165)",
        "├── a/ (dir, size=94853)",
        "│   ├── e/ (dir, size=584)",
        "│   │   └── i (file, size=584)",
        "│   ├── f (file, size=29116)",
        "│   ├── g (file, size=2557)",
        "│   └── h.lst (file, size=62596)",
        "├── b.txt (file, size=14848514)",
        "├── c.dat (file, size=8504156)",
        "└── d/ (dir, size=24933642)",
        "    ├── d.ext (file, size=5626152)",
        "    ├── d.log (file, size=8033020)",
        "    ├── j (file, size=4060174)",
        "    └── k (file, size=7214296)",
    ]


def test_render_empty_root():
    assert render_tree(parse_transcript("$ cd /")) == ["/ (dir, size=0)"]
