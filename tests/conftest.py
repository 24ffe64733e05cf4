import pytest
from clidle.datasets import WordCorpus

WORDS = b"crane\ntrace\nslate\nstare\nraise\narray\neerie\nsloth\nfight\ndumpy\n"


@pytest.fixture
def words() -> WordCorpus:
    return WordCorpus.load(WORDS)
