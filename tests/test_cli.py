"""End-to-end tests for the command-line front end."""

import getpass
import os

from PIL import Image

from vcard_builder.cli import EXIT_INVALID, EXIT_QR_TOO_LARGE, main


def _args(tmp_path, *extra):
    return [
        "--no-prompt",
        "--vcf", str(tmp_path),
        "--out-svg", str(tmp_path / "qr.svg"),
        *extra,
    ]


def test_writes_vcf_and_qr(tmp_path, capsys):
    code = main(_args(tmp_path, "--first-name", "Max", "--last-name", "Mustermann",
                      "--social-twitter", "@max"))
    assert code == 0

    data = (tmp_path / "Max_Mustermann.vcf").read_bytes()
    assert data.startswith(b"BEGIN:VCARD\r\nVERSION:3.0\r\n")
    assert data.endswith(b"END:VCARD")
    assert b"X-SOCIALPROFILE;TYPE=twitter:https://x.com/max" in data
    assert (tmp_path / "qr.svg").exists()
    assert "Saved vCard (.vcf)" in capsys.readouterr().out


def test_explicit_vcf_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "card.vcf"
    code = main(["--no-prompt", "--no-qr", "--vcf", str(target),
                 "--first-name", "Änne", "--last-name", "Müller"])
    assert code == 0
    assert "N:Müller;Änne;;;" in target.read_bytes().decode("utf-8")
    assert not (tmp_path / "vcf_qr.svg").exists()


def test_missing_names_exit_invalid(tmp_path, capsys):
    code = main(_args(tmp_path, "--first-name", "Max"))
    assert code == EXIT_INVALID
    assert "first and last name are required" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_work_detail_without_company_rejected(tmp_path, capsys):
    code = main(_args(tmp_path, "--first-name", "Max", "--last-name", "Mustermann",
                      "--phone-work", "+49 40 123456"))
    assert code == EXIT_INVALID
    assert "company" in capsys.readouterr().err


def test_photo_embedded_in_vcf_only(tmp_path):
    photo = tmp_path / "me.png"
    Image.new("RGB", (8, 8), "green").save(photo, "PNG")
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    code = main(["--no-prompt", "--vcf", str(out_dir), "--out-svg", str(out_dir / "qr.svg"),
                 "--first-name", "Max", "--last-name", "Mustermann", "--photo", str(photo)])
    assert code == 0
    assert b"PHOTO;ENCODING=b64;TYPE=PNG:" in (out_dir / "Max_Mustermann.vcf").read_bytes()


def test_rejected_photo_blocks_export(tmp_path, capsys):
    photo = tmp_path / "me.gif"
    Image.new("P", (4, 4)).save(photo, "GIF")
    code = main(_args(tmp_path, "--first-name", "Max", "--last-name", "Mustermann",
                      "--photo", str(photo)))
    assert code == EXIT_INVALID
    assert "photo: Only JPG or PNG images are supported." in capsys.readouterr().err
    assert list(tmp_path.glob("*.vcf")) == []


def test_oversized_qr_payload(tmp_path, capsys):
    code = main(_args(tmp_path, "--first-name", "Max", "--last-name", "Mustermann",
                      "--notes", "n" * 3000))
    assert code == EXIT_QR_TOO_LARGE
    assert "too large" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_missing_photo_file_skipped(tmp_path, capsys):
    code = main(_args(tmp_path, "--first-name", "Max", "--last-name", "Mustermann",
                      "--photo", str(tmp_path / "nowhere.png")))
    assert code == 0
    assert "could not be read" in capsys.readouterr().err
    data = (tmp_path / "Max_Mustermann.vcf").read_bytes()
    assert b"PHOTO" not in data
    assert (tmp_path / "qr.svg").exists()


def test_truncated_photo_skipped(tmp_path, capsys):
    photo = tmp_path / "cut.png"
    Image.frombytes("RGB", (32, 32), os.urandom(32 * 32 * 3)).save(photo, "PNG")
    data = photo.read_bytes()
    photo.write_bytes(data[: len(data) // 2])

    code = main(_args(tmp_path, "--first-name", "Max", "--last-name", "Mustermann",
                      "--photo", str(photo)))
    assert code == 0
    assert "could not be read" in capsys.readouterr().err
    assert b"PHOTO" not in (tmp_path / "Max_Mustermann.vcf").read_bytes()


def test_preview_prints_card(tmp_path, capsys):
    code = main(_args(tmp_path, "--no-qr", "--preview", "--first-name", "Max", "--last-name", "Mustermann",
                      "--title", "Engineer", "--company", "Example Ltd"))
    assert code == 0
    out = capsys.readouterr().out
    assert "Engineer @ Example Ltd" in out
    assert "FN:Max Mustermann" in out


def test_preview_placeholder_when_invalid(tmp_path, capsys):
    code = main(_args(tmp_path, "--preview"))
    assert code == EXIT_INVALID
    assert "Fill in at least first and last name" in capsys.readouterr().out


def test_prompts_for_missing_values(tmp_path, monkeypatch):
    answers = iter(["Max", "Mustermann"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    monkeypatch.setattr(getpass, "getpass", lambda prompt: "")

    code = main(["--no-qr", "--vcf", str(tmp_path)])
    assert code == 0
    assert (tmp_path / "Max_Mustermann.vcf").exists()
