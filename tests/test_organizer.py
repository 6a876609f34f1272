import json
import os

import pytest

from dirsort.file_mover import MoveStatus, REASON_NAME_CONFLICT
from dirsort.organizer import (
    format_auto_detect_result,
    format_move_report,
    format_type_result,
)

from conftest import snapshot_tree


def subdirs(path):
    return sorted(p.name for p in path.iterdir() if p.is_dir())


class TestAutoDetect:
    def test_groups_common_token_and_leaves_others(self, target_dir, make_files, sorter):
        make_files("trip_paris_01.jpg", "trip_paris_02.jpg", "invoice.pdf")

        result = sorter.organize_by_auto_detect(target_dir)

        assert result.ranked_tokens == [("paris", 2), ("trip", 2)]
        assert [label for label, _ in result.groups] == ["paris"]
        assert subdirs(target_dir) == ["paris"]
        assert sorted(p.name for p in (target_dir / "paris").iterdir()) == [
            "trip_paris_01.jpg", "trip_paris_02.jpg"]
        assert (target_dir / "invoice.pdf").exists()
        assert result.moved_count == 2
        assert result.skipped_count == 0

    def test_single_file_repeating_token_is_not_a_group(self, target_dir, make_files, sorter):
        make_files("aaaa.txt", "notes.md")

        result = sorter.organize_by_auto_detect(target_dir)

        assert result.no_tokens_detected
        assert result.groups == []
        assert subdirs(target_dir) == []

    def test_ignored_tokens_do_not_form_groups(self, target_dir, make_files, sorter):
        make_files("official_a1.mp3", "official_b2.mp3")

        result = sorter.organize_by_auto_detect(target_dir)

        assert result.no_tokens_detected

    def test_overlapping_groups_when_not_exclusive(self, target_dir, make_files, make_sorter):
        make_files("trip_paris_01.jpg", "trip_paris_02.jpg", "invoice.pdf")
        before = snapshot_tree(target_dir)

        result = make_sorter(exclusive_groups=False).organize_by_auto_detect(target_dir)

        assert [label for label, _ in result.groups] == ["paris", "trip"]
        _, trip_report = result.groups[1]
        assert trip_report.moved_count == 0
        assert all(o.status == MoveStatus.SKIPPED_ERROR for o in trip_report.outcomes)
        assert sorted(snapshot_tree(target_dir).values()) == sorted(before.values())

    def test_overlap_preview_matches_execution(self, target_dir, make_files, make_sorter):
        make_files("trip_paris_01.jpg", "trip_paris_02.jpg")

        def statuses(result):
            return [[o.status for o in report.outcomes] for _, report in result.groups]

        preview = make_sorter(exclusive_groups=False, dry_run=True).organize_by_auto_detect(target_dir)
        executed = make_sorter(exclusive_groups=False).organize_by_auto_detect(target_dir)

        assert statuses(preview) == [[MoveStatus.PLANNED] * 2, [MoveStatus.SKIPPED_ERROR] * 2]
        assert statuses(executed) == [[MoveStatus.MOVED] * 2, [MoveStatus.SKIPPED_ERROR] * 2]

    def test_token_mode_leaves_substring_matches(self, target_dir, make_files, make_sorter):
        make_files("paris_01.jpg", "paris_02.jpg", "comparison.txt")

        result = make_sorter(match_mode="token").organize_by_auto_detect(target_dir)

        assert [label for label, _ in result.groups] == ["paris"]
        assert sorted(p.name for p in (target_dir / "paris").iterdir()) == [
            "paris_01.jpg", "paris_02.jpg"]
        assert (target_dir / "comparison.txt").exists()

    def test_group_limit(self, target_dir, make_files, make_sorter):
        make_files(*[f"group{i:02d}_{n}.txt" for i in range(4) for n in "ab"])

        result = make_sorter(max_groups=2).organize_by_auto_detect(target_dir)

        assert [label for label, _ in result.groups] == ["group00", "group01"]

    def test_failed_group_does_not_stop_others(self, target_dir, make_files, sorter):
        make_files("alpha", "alpha_one.txt", "alpha_two.txt", "beta_one.txt", "beta_two.txt")

        result = sorter.organize_by_auto_detect(target_dir)

        reports = dict(result.groups)
        assert reports["alpha"].error
        assert reports["alpha"].skipped_count == 3
        assert reports["beta"].moved_count == 2
        assert (target_dir / "beta" / "beta_one.txt").exists()
        assert (target_dir / "alpha_one.txt").exists()

    def test_dry_run_leaves_tree_untouched(self, target_dir, make_files, make_sorter):
        make_files("trip_paris_01.jpg", "trip_paris_02.jpg")
        before = snapshot_tree(target_dir)

        result = make_sorter(dry_run=True).organize_by_auto_detect(target_dir)

        assert result.dry_run
        assert result.moved_count == 2
        assert snapshot_tree(target_dir) == before
        assert subdirs(target_dir) == []

    def test_report_text(self, target_dir, make_files, sorter):
        make_files("trip_paris_01.jpg", "trip_paris_02.jpg")

        text = format_auto_detect_result(sorter.organize_by_auto_detect(target_dir))

        assert "paris(2)" in text
        assert "[paris]" in text


class TestExplicitMatch:
    def test_collision_is_reported_and_rest_moved(self, target_dir, make_files, sorter):
        make_files("report.txt", "report_final.txt")
        (target_dir / "report").mkdir()
        (target_dir / "report" / "report.txt").write_text("original", encoding="utf-8")

        report = sorter.organize_by_explicit_match(target_dir, "report")

        assert report.moved_count == 1
        assert report.skipped == [("report.txt", REASON_NAME_CONFLICT)]
        assert (target_dir / "report" / "report_final.txt").exists()
        assert (target_dir / "report" / "report.txt").read_text(encoding="utf-8") == "original"
        assert (target_dir / "report.txt").exists()

    @pytest.mark.skipif(os.sep == "\\", reason="백슬래시 파일명은 POSIX 전용")
    def test_label_is_sanitized(self, target_dir, make_files, sorter):
        make_files("x\\y_1.txt", "x\\y_2.txt")

        report = sorter.organize_by_explicit_match(target_dir, "X\\Y")

        assert report.moved_count == 2
        assert report.destination_dir == target_dir.resolve() / "X_Y"
        assert (target_dir / "X_Y" / "x\\y_1.txt").exists()

    def test_single_match_is_moved(self, target_dir, make_files, sorter):
        make_files("Budget.xlsx", "notes.txt")

        report = sorter.organize_by_explicit_match(target_dir, "BUDGET")

        assert report.moved_count == 1
        assert (target_dir / "BUDGET" / "Budget.xlsx").exists()

    def test_blank_substring(self, target_dir, sorter):
        with pytest.raises(ValueError):
            sorter.organize_by_explicit_match(target_dir, "")

    def test_report_text(self, target_dir, make_files, sorter):
        make_files("report.txt")

        text = format_move_report(sorter.organize_by_explicit_match(target_dir, "report"))

        assert "이동: 1개  건너뜀: 0개" in text
        assert "[report]" in text


class TestEmptyDirectory:
    def test_explicit_reports_no_match(self, target_dir, sorter):
        report = sorter.organize_by_explicit_match(target_dir, "anything")

        assert report.no_match
        assert report.moved_count == 0
        assert "anything" in format_move_report(report)
        assert subdirs(target_dir) == []

    def test_auto_reports_no_tokens(self, target_dir, sorter):
        result = sorter.organize_by_auto_detect(target_dir)

        assert result.no_tokens_detected
        assert format_auto_detect_result(result)
        assert subdirs(target_dir) == []


class TestByType:
    def test_moves_by_category_and_skips_dangerous(self, target_dir, make_files, sorter):
        make_files("photo.JPG", "paper.pdf", "setup.exe", "mystery.xyz", "script.js")

        result = sorter.organize_by_type(target_dir)

        assert [label for label, _ in result.groups] == ["Other", "Documents", "Images"]
        assert (target_dir / "Images" / "photo.JPG").exists()
        assert (target_dir / "Documents" / "paper.pdf").exists()
        assert (target_dir / "Other" / "mystery.xyz").exists()
        assert (target_dir / "setup.exe").exists()
        assert (target_dir / "script.js").exists()
        assert sorted(result.skipped) == [("script.js", "dangerous extension"),
                                          ("setup.exe", "dangerous extension")]
        assert result.moved_count == 3
        assert result.skipped_count == 2
        assert "dangerous extension" in format_type_result(result)

    def test_listing_order(self, target_dir, make_files, sorter):
        make_files("a.pdf", "b.jpg", "c.ttf", "d.xyz", "e.mp3")

        listing = sorter.list_by_type(target_dir)

        assert list(listing) == ["Images", "Audio", "Documents", "Fonts", "Other"]
        assert [e.name for e in listing["Other"]] == ["d.xyz"]


def test_conservation_and_no_overwrite(target_dir, make_files, make_sorter):
    make_files(
        "trip_paris_01.jpg", "trip_paris_02.jpg", "trip_rome_01.jpg", "trip_rome_02.jpg",
        "paris/trip_paris_01.jpg", "invoice_march.pdf", "invoice_april.pdf", "misc.bin",
    )
    (target_dir / "paris" / "trip_paris_01.jpg").write_text("existing", encoding="utf-8")
    before = snapshot_tree(target_dir)

    make_sorter().organize_by_auto_detect(target_dir)

    after = snapshot_tree(target_dir)
    assert len(after) == len(before)
    assert sorted(after.values()) == sorted(before.values())
    assert after["paris/trip_paris_01.jpg"] == "existing"


def test_session_log_written(target_dir, make_files, log_dir, sorter):
    make_files("trip_paris_01.jpg", "trip_paris_02.jpg")

    sorter.organize_by_auto_detect(target_dir)
    sorter.finalize()

    json_log = sorter.logger.get_log_paths()["json_log"]
    data = json.loads(json_log.read_text(encoding="utf-8"))
    actions = [entry["action"] for entry in data["entries"]]
    assert "토큰 순위 결정" in actions
    assert "파일 이동" in actions
