from tests.utils import sample_manifest


def test_vite_tags_hot(app, write_hot_file):
    write_hot_file("http://x")

    actual_response = app.get("/vite/tags", params={"files": "a.css|b.js"})

    assert actual_response.status_code == 200
    assert actual_response.headers["content-type"].startswith("text/html")
    assert actual_response.text == (
        '<link rel="stylesheet" href="http://x/a.css" />'
        '<script type="module" src="http://x/b.js"></script>'
        '<script type="module" src="http://x/@vite/client"></script>'
    )


def test_vite_tags_production(app, write_manifest):
    write_manifest(sample_manifest)

    actual_response = app.get(
        "/vite/tags", params={"files": "resources/js/app.js|resources/css/app.css"}
    )

    assert actual_response.status_code == 200
    assert actual_response.text == (
        '<script type="module" src="build/assets/app-XyZ123.js"></script>'
        '<link rel="stylesheet" href="build/assets/app-OH0OBLf7.css" />'
    )


def test_vite_tags_query_overrides(app, write_manifest, write_hot_file):
    write_hot_file("http://x")
    write_manifest({"a.js": {"file": "a.abc.js"}}, build_directory="dist")

    actual_response = app.get(
        "/vite/tags",
        params={"files": "a.js", "hot_file_name": "missing", "build_directory": "dist"},
    )

    assert actual_response.text == '<script type="module" src="dist/a.abc.js"></script>'


def test_vite_tags_without_files(app):
    assert app.get("/vite/tags").status_code == 204
    assert app.get("/vite/tags", params={"files": "|"}).status_code == 204


def test_vite_tags_unsupported_extension(app):
    actual_response = app.get("/vite/tags", params={"files": "a.png"})

    assert actual_response.status_code == 200
    assert actual_response.text == ""


def test_vite_tags_hot_file_outside_base_path_is_ignored(app, tmp_path):
    secret = tmp_path.parent / f"{tmp_path.name}-secret.txt"
    secret.write_text("LEAKED", encoding="utf-8")

    relative = app.get(
        "/vite/tags", params={"files": "a.js", "hot_file_name": f"../{secret.name}"}
    )
    absolute = app.get(
        "/vite/tags", params={"files": "a.js", "hot_file_name": str(secret)}
    )

    for actual_response in (relative, absolute):
        assert actual_response.status_code == 200
        assert "LEAKED" not in actual_response.text
        assert actual_response.text == '<script type="module" src="build/"></script>'


def test_vite_tags_build_directory_outside_base_path_is_ignored(app, tmp_path):
    outside = tmp_path.parent / f"{tmp_path.name}-build"
    outside.mkdir()
    (outside / "manifest.json").write_text(
        '{"a.js": {"file": "LEAKED.js"}}', encoding="utf-8"
    )

    actual_response = app.get(
        "/vite/tags", params={"files": "a.js", "build_directory": str(outside)}
    )

    assert actual_response.status_code == 200
    assert "LEAKED" not in actual_response.text
