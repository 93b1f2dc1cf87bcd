from streamlit.testing.v1 import AppTest

VALID = {
    "namaBapak": "Budi",
    "namaIbu": "Siti",
    "namaAdik": "Rina",
    "namaKakak": "Andi",
    "nik": "1234567890123456",
    "email": "dewi@contoh.id",
    "namaKamu": "Dewi",
    "kataSandi": "p" * 120,
}


def start_app():
    at = AppTest.from_file("../app.py", default_timeout=10)
    at.run()
    assert not at.exception
    return at


def fill(at, values):
    for name, value in values.items():
        at.text_input(key=f"reg_{name}").input(value)
    at.run()
    assert not at.exception


def style_blocks(at):
    return [m for m in at.markdown if "<style>" in m.value]


def markdown_text(at):
    return " ".join(m.value for m in at.markdown)


def test_base_css_present_on_every_rerun():
    at = start_app()
    assert len(style_blocks(at)) == 1
    at.run()
    assert len(style_blocks(at)) == 1
    fill(at, {"kataSandi": "p" * 60})
    assert len(style_blocks(at)) == 1
    assert 'class="meter"' in markdown_text(at)


def test_submit_disabled_until_form_valid():
    at = start_app()
    submit = at.button(key="reg_submit")
    assert submit.disabled
    assert submit.label == "Lengkapi Semua Data"

    fill(at, VALID)
    submit = at.button(key="reg_submit")
    assert not submit.disabled
    assert submit.label == "Daftar Sekarang"

    # one field turning invalid blocks submission again
    fill(at, {"email": "a@b"})
    submit = at.button(key="reg_submit")
    assert submit.disabled
    assert submit.label == "Lengkapi Semua Data"
    assert "Format email tidak valid" in markdown_text(at)


def test_submit_shows_confirmation_then_close_returns_to_form():
    at = start_app()
    fill(at, VALID)
    at.button(key="reg_submit").click().run()
    assert not at.exception

    assert len(at.text_input) == 0
    assert at.subheader[0].value == "Pendaftaran Berhasil!"
    summary = markdown_text(at)
    assert "1234****3456" in summary
    assert "1234567890123456" not in summary
    assert VALID["kataSandi"] not in summary
    assert "Dewi" in summary

    at.button(key="reg_close").click().run()
    assert not at.exception
    assert len(at.text_input) == 8
    assert at.text_input(key="reg_namaBapak").value == "Budi"
    assert at.text_input(key="reg_nik").value == VALID["nik"]
    assert not at.button(key="reg_submit").disabled


def test_non_numeric_nik_input_is_reverted():
    at = start_app()
    fill(at, {"nik": "1234"})
    fill(at, {"nik": "1234x"})
    assert at.text_input(key="reg_nik").value == "1234"
    assert "NIK harus tepat 16 digit" in markdown_text(at)
