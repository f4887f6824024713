import pytest

import mead_math
from mead_cli import main, build_parser


def make_reader(*answers):
    pending = iter(answers)

    def reader(prompt):
        return next(pending)
    return reader


def no_prompts(prompt):
    raise AssertionError(f"unexpected prompt: {prompt}")


def run_cli(argv, reader):
    lines = []
    code = main(argv, reader=reader, writer=lines.append)
    return code, "\n".join(lines)


def test_us_prompt_session():
    code, out = run_cli([], make_reader("1", "5", "14", "Semi-Sweet", "1"))
    assert code == 0
    assert "Mead Ingredients Calculator" in out
    assert "Target Original Gravity (OG): 1.117" in out
    assert "Required Honey:             16.71 lbs (pounds)" in out
    assert "Required Water (to top off):  3.91 gallons" in out
    assert "Total Gravity Points Needed:  585" in out
    assert "ESTIMATE" in out
    assert "NOTE:" not in out


def test_metric_prompt_session():
    code, out = run_cli([], make_reader("2", "20", "14", "semi-sweet", "1"))
    assert code == 0
    assert "Required Honey:             8.01 kg (kilograms)" in out
    assert "Required Water (to top off):  15.65 liters" in out
    assert "Total Gravity Points Needed:  618 (Based on US Gal/Lbs)" in out


def test_turbo_note_printed():
    code, out = run_cli([], make_reader("1", "5", "18", "Dessert", "2"))
    assert code == 0
    assert "NOTE: Turbo Yeast selected" in out
    assert "Target Original Gravity (OG): 1.137" in out


def test_flags_skip_prompts():
    argv = ["--units", "us", "--volume", "5", "--abv", "14",
            "--sweetness", "semi-sweet", "--standard"]
    code, out = run_cli(argv, no_prompts)
    assert code == 0
    assert "16.71 lbs" in out


def test_missing_flags_are_prompted():
    code, out = run_cli(["--units", "metric", "--turbo"], make_reader("10", "12", "Dry"))
    assert code == 0
    assert "kg (kilograms)" in out


def test_invalid_unit_selection():
    code, out = run_cli([], make_reader("3"))
    assert code == 1
    assert "Invalid selection. Exiting." in out


@pytest.mark.parametrize("answers, message", [
    (("1", "0", "14", "Dry", "1"), "Invalid volume"),
    (("1", "abc", "14", "Dry", "1"), "Invalid volume"),
    (("1", "1e308", "25", "Dessert", "1"), "too large"),
    (("1", "5", "30", "Dry", "1"), "Invalid ABV range"),
    (("1", "5", "14", "Dry", "3"), "Unknown yeast method"),
    (("1", "5", "14", "Medium", "1"), "Invalid sweetness level"),
])
def test_invalid_answers_exit_with_error(answers, message):
    code, out = run_cli([], make_reader(*answers))
    assert code == 1
    assert message in out
    assert "Required Honey" not in out


def test_end_of_input_is_an_error():
    def reader(prompt):
        raise EOFError

    code, out = run_cli(["--units", "us"], reader)
    assert code == 1
    assert "No input given" in out


def test_impractical_gravity_stops_before_ingredients(monkeypatch):
    monkeypatch.setattr(mead_math, "ABV_MAX", 40)
    code, out = run_cli([], make_reader("1", "5", "35", "Dessert", "1"))
    assert code == 1
    assert "extremely high" in out
    assert "Please try a lower ABV" in out
    assert "Required Honey" not in out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0
    assert "0.1.1" in capsys.readouterr().out


@pytest.mark.parametrize("topic, heading", [
    ("water", "Water quality in mead making"),
    ("honey", "Main honey varieties for mead"),
])
def test_info_flag_prints_plain_notes(topic, heading):
    code, out = run_cli(["--info", topic], no_prompts)
    assert code == 0
    assert heading in out
    assert "[b]" not in out
    assert "Required Honey" not in out
