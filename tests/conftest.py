import pytest

SAMPLE_CSV = (
    "Word,Meaning (JP),Phonetic Symbol,English Definition,Example Sentence\n"
    "ephemeral,はかない,/ɪˈfem(ə)rəl/,lasting for a very short time,"
    '"The ephemeral beauty of cherry blossoms makes them special."\n'
    "serendipity,幸運な偶然,/ˌserənˈdɪpəti/,finding good things without looking for them,"
    '"Meeting my best friend was pure serendipity, as we both love the same, rare books."\n'
    "candid,率直な,/ˈkændɪd/,truthful and straightforward,\"She gave a candid answer.\"\n"
)


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_cards.db")
    return db_path


@pytest.fixture
def sample_csv(tmp_path):
    """Write the sample vocabulary CSV and return its path."""
    path = tmp_path / "words.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return str(path)
