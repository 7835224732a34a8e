import pytest

import run_deck
from errors import PresentationBuildError, RemoteServiceError


@pytest.fixture
def captured(monkeypatch):
    calls = {}

    def fake_build(company_name, session=None, slides=None, record=None, key_column=None):
        calls.update(company=company_name, slides=slides, record=record, key_column=key_column)
        session.set_document_id("pres42")
        return "pres42"

    monkeypatch.setattr(run_deck, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(run_deck, "build_presentation", fake_build)
    return calls


def test_prints_presentation_id(captured, capsys):
    assert run_deck.main(["Acme"]) == 0
    assert capsys.readouterr().out.strip() == "pres42"
    assert captured["slides"] is None
    assert captured["record"] is None


def test_no_presets_passes_empty_slide_list(captured):
    run_deck.main(["Acme", "--no-presets"])
    assert captured["slides"] == []


def test_csv_record_is_passed_through(captured, companies_csv):
    run_deck.main(["acme", "--csv", str(companies_csv)])
    assert captured["record"]["industry"] == "Manufacturing"
    assert captured["key_column"] == "companyName"


def test_unknown_company_builds_without_record(captured, companies_csv):
    assert run_deck.main(["Globex", "--csv", str(companies_csv)]) == 0
    assert captured["record"] is None


def test_missing_csv_exits_non_zero(captured, tmp_path):
    assert run_deck.main(["Acme", "--csv", str(tmp_path / "nope.csv")]) == 1
    assert captured == {}


def test_build_failure_exits_non_zero(monkeypatch, capsys):
    def failing_build(company_name, **kwargs):
        raise PresentationBuildError("Failed to build deck", document_id="pres7") from RemoteServiceError("boom", 500)

    monkeypatch.setattr(run_deck, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(run_deck, "build_presentation", failing_build)
    assert run_deck.main(["Acme"]) == 1
    assert capsys.readouterr().out == ""
