from xmldocexamples.cli import ui_helpers
from xmldocexamples.cli.ui_helpers import CLIUIHelpers
from xmldocexamples.xmldoc.parser import ExampleCode


def test_render_banner(monkeypatch):
    helper = CLIUIHelpers()

    monkeypatch.setattr(ui_helpers.pyfiglet, "figlet_format", lambda text, font=None: "BANNER")
    monkeypatch.setattr(ui_helpers, "colored", lambda text, color=None: f"[{text}]")
    monkeypatch.setattr(ui_helpers, "tabulate", lambda data, tablefmt=None: data[0][0])

    sections = helper.render_banner(table_width=40)

    assert sections.heading == "[BANNER]"
    assert "example code extractor" in sections.footer_lines[1]
    assert sections.footer_lines[0] == "=" * 40


def test_display_banner_echoes_every_section(monkeypatch):
    helper = CLIUIHelpers()
    monkeypatch.setattr(ui_helpers.pyfiglet, "figlet_format", lambda text, font=None: "BANNER")
    lines = []

    helper.display_banner(lines.append, table_width=20)

    assert len(lines) == 5
    assert "BANNER" in lines[0]


def test_render_table_uses_header_row():
    helper = CLIUIHelpers()

    output = helper.render_table([["Member", "Code"], ["M:A", "call()"]])

    assert "Member" in output
    assert "M:A" in output
    assert "call()" in output


def test_render_plain(monkeypatch):
    helper = CLIUIHelpers()
    monkeypatch.setattr(ui_helpers, "colored", lambda text, color=None, attrs=None: f"<{text}>")

    blocks = helper.render_plain([ExampleCode("M:A", "a()"), ExampleCode(None, "b()")])

    assert blocks == ["<M:A>\r\na()\r\n", "<<unnamed>>\r\nb()\r\n"]
