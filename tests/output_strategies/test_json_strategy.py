"""Unit tests for the JSON document renderer."""

import io
import json

import pytest
from anytree import PreOrderIter

from mddir.config.options import BuildOptions, EffectiveOptions
from mddir.file_system_tree.tree_builder import TreeBuilder
from mddir.file_system_tree.tree_node import TreeNode
from mddir.output_strategies.json_strategy import JSONDocumentRenderer


def walk_document(nodes):
    """Yield every name in a parsed document, depth first."""
    for node in nodes:
        yield node["name"]
        yield from walk_document(node.get("children", []))


def render_document(builder, path):
    sink = io.StringIO()
    JSONDocumentRenderer(sink).render(builder, path)
    return sink.getvalue()


@pytest.fixture
def builder():
    return TreeBuilder(EffectiveOptions(root_label="project"))


def test_format_document_pretty_prints():
    root = TreeNode("project", is_dir=True)
    TreeNode("a.txt", parent=root, size_label="5 B")

    document = JSONDocumentRenderer().format_document([root])

    assert document == "\n".join(
        [
            "[",
            "  {",
            '    "name": "project",',
            '    "isDir": true,',
            '    "children": [',
            "      {",
            '        "name": "a.txt",',
            '        "isDir": false,',
            '        "size": "5 B"',
            "      }",
            "    ]",
            "  }",
            "]",
        ]
    )


def test_format_document_empty():
    assert JSONDocumentRenderer().format_document([]) == "[]"


def test_format_document_keeps_non_ascii_names():
    document = JSONDocumentRenderer(indent=None).format_document([TreeNode("文档.md")])
    assert "文档.md" in document


def test_render_structure(builder, project_dir):
    document = json.loads(render_document(builder, project_dir))

    assert len(document) == 1
    root = document[0]
    assert root["name"] == "project"
    assert root["isDir"] is True
    assert [child["name"] for child in root["children"]] == ["README.md", "src"]
    readme, src = root["children"]
    assert "children" not in readme
    assert "size" not in readme
    assert [child["name"] for child in src["children"]] == ["a.txt", "utils"]


def test_render_missing_root(builder, tmp_path):
    assert json.loads(render_document(builder, tmp_path / "missing")) == []


@pytest.mark.parametrize(
    "build",
    [
        BuildOptions(),
        BuildOptions(max_depth=0),
        BuildOptions(keep_ignored_entries=True),
        BuildOptions(keep_ignored_entries=True, show_ignored_size=True, show_file_size=True),
    ],
)
def test_document_round_trip_matches_traversal(project_dir, build):
    """Parsing the document reproduces the names of a direct traversal."""
    builder = TreeBuilder(EffectiveOptions(root_label="project", build=build))

    document = json.loads(render_document(builder, project_dir))
    traversed = [node.name for root in builder.build_tree_data(project_dir) for node in PreOrderIter(root)]

    assert list(walk_document(document)) == traversed


def test_render_sizes(project_dir):
    builder = TreeBuilder(
        EffectiveOptions(
            root_label="project",
            build=BuildOptions(keep_ignored_entries=True, show_ignored_size=True, show_file_size=True),
        )
    )

    root = json.loads(render_document(builder, project_dir))[0]
    by_name = {child["name"]: child for child in root["children"]}

    assert by_name["README.md"]["size"] == "5 B"
    assert by_name["src"]["size"] == "15 B"
    assert by_name["node_modules"] == {"name": "node_modules", "isDir": True, "size": "20 B"}
