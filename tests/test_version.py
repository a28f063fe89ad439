import pressform


def test_get_version_matches_public_api() -> None:
    assert pressform.get_version() == pressform.__version__
    assert isinstance(pressform.__version__, str)
