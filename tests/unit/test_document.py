from pagewright.app.document import build_base_href, build_document
from pagewright.utils.html_tags import object_to_html_tags


class TestObjectToHtmlTags:
    def test_string_contents(self) -> None:
        assert object_to_html_tags({"title": "Home"}, "  ") == "  <title>Home</title>\n"

    def test_attribute_lists(self) -> None:
        html = object_to_html_tags(
            {"meta": [{"name": "description", "content": 'say "hi"'}, {"name": "robots", "content": None}]}
        )
        assert html == '<meta name="description" content="say hi">\n<meta name="robots" content="">\n'

    def test_non_mapping_input(self) -> None:
        assert object_to_html_tags(None) == ""
        assert object_to_html_tags(["title"]) == ""


def test_base_href() -> None:
    assert build_base_href("example.com:8443", "v3") == "//example.com:8443/v3/"


def test_document_skeleton() -> None:
    html = build_document(
        content="<main>hi</main>",
        base_href="//example.com/v1/",
        locale=None,
        head_tags={"title": "Home"},
        styles="<link s>",
        scripts="<script s></script>",
        bootstrap_scripts=["check()", "routes()"],
    )

    assert html == (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <base href="//example.com/v1/">\n'
        '  <meta charset="utf-8">\n'
        "  <title>Home</title>\n"
        "<link s>\n"
        "  <script>\ncheck()\n  </script>\n"
        "  <script>\nroutes()\n  </script>\n"
        "</head>\n"
        "<body><main>hi</main>\n"
        "<script s></script>\n"
        "</body>\n"
        "</html>"
    )
