"""分数文件读取测试"""

import pytest
from clustools.exceptions import MalformedInputError
from clustools.services.input_reader import element_count, parse_score_line, read_scores


class TestParseScoreLine:
    """parse_score_line 测试"""

    @pytest.mark.parametrize(
        "line",
        ["0\t1\t0.25", "0 1 0.25", "0+1+0.25", "  0 \t 1  0.25  \n", "a b 0.25 extra"],
    )
    def test_accepts_supported_separators(self, line):
        """测试制表符、空格和 + 分隔"""
        assert parse_score_line(line, 1) == pytest.approx(0.25)

    def test_too_few_fields(self):
        """测试字段不足"""
        with pytest.raises(MalformedInputError) as exc_info:
            parse_score_line("0 1", 7)

        assert exc_info.value.line_number == 7
        assert "第 7 行" in str(exc_info.value)

    def test_non_numeric_score(self):
        """测试分数不是数字"""
        with pytest.raises(MalformedInputError, match="不是数字"):
            parse_score_line("0 1 abc", 2)

    def test_non_finite_score(self):
        """测试分数为 inf"""
        with pytest.raises(MalformedInputError, match="有限值"):
            parse_score_line("0 1 inf", 3)


class TestElementCount:
    """element_count 测试"""

    @pytest.mark.parametrize(("records", "expected"), [(1, 1), (4, 2), (9, 3), (100, 10)])
    def test_perfect_squares(self, records, expected):
        """测试完全平方数"""
        assert element_count(records) == expected

    @pytest.mark.parametrize("records", [0, 2, 5, 99])
    def test_rejects_non_squares(self, records):
        """测试非完全平方数"""
        with pytest.raises(MalformedInputError, match="完全平方数"):
            element_count(records)


class TestReadScores:
    """read_scores 测试"""

    def test_reads_row_major_scores(self, tmp_path):
        """测试按行优先顺序读取"""
        path = tmp_path / "scores.txt"
        path.write_text("0 0 0\n0 1 0.3\n1 0 0.5\n1 1 0\n\n", encoding="utf-8")

        total, raw = read_scores(path)

        assert total == 2
        assert raw == [0.0, 0.3, 0.5, 0.0]

    def test_missing_file(self, tmp_path):
        """测试文件不存在"""
        with pytest.raises(FileNotFoundError):
            read_scores(tmp_path / "missing.txt")

    def test_record_count_not_square(self, tmp_path):
        """测试记录数不是完全平方数"""
        path = tmp_path / "scores.txt"
        path.write_text("0 0 0\n0 1 0.3\n1 0 0.5\n", encoding="utf-8")

        with pytest.raises(MalformedInputError):
            read_scores(path)

    def test_reports_bad_line_number(self, tmp_path):
        """测试错误信息包含行号"""
        path = tmp_path / "scores.txt"
        path.write_text("0 0 0\n0 1 x\n1 0 0.5\n1 1 0\n", encoding="utf-8")

        with pytest.raises(MalformedInputError) as exc_info:
            read_scores(path)

        assert exc_info.value.line_number == 2
