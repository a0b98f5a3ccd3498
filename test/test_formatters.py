import json

from cssrename.output.formatters import (
    format_change_pairs,
    format_output,
    format_summary,
)


class TestFormatChangePairs:
    def test_aligned(self):
        result = format_change_pairs([
            {"oldClass": "a_b", "newClass": "a-b"},
            {"oldClass": "long_name", "newClass": "long-name"},
        ])
        assert result.splitlines() == [
            "a_b       -> a-b",
            "long_name -> long-name",
        ]


class TestFormatSummary:
    def test_with_changes(self):
        summary = {
            "totalChanges": 2,
            "modifiedFiles": ["main.css"],
            "changes": [
                {"file": "main.css", "line": 1, "oldClass": "a_b", "newClass": "a-b"},
                {"file": "main.css", "line": 5, "oldClass": "c_d", "newClass": "c-d"},
            ],
        }
        result = format_summary(summary)
        assert "2 change(s) in 1 file(s):" in result
        assert "  main.css" in result
        assert "main.css:5 c_d -> c-d" in result

    def test_no_changes(self):
        assert format_summary({"totalChanges": 0, "modifiedFiles": [], "changes": []}) == "No changes"


class TestFormatOutput:
    def test_json(self):
        data = {"totalChanges": 0, "modifiedFiles": [], "changes": []}
        assert json.loads(format_output(data, "json")) == data

    def test_file_list(self):
        assert format_output(["a.css", "b.css"]) == "a.css\nb.css"

    def test_empty_list(self):
        assert format_output([]) == "No results"
