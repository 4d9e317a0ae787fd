import io

import pytest


class FakeUpload(io.BytesIO):
    """Stand-in for a Streamlit UploadedFile: a named buffer with getvalue()"""

    def __init__(self, name, content):
        if isinstance(content, str):
            content = content.encode('utf-8')
        super().__init__(content)
        self.name = name


@pytest.fixture
def make_upload():
    """Build an uploaded-file double from a name and str/bytes content"""
    return FakeUpload


@pytest.fixture
def following_text():
    return "alice\nBOB!!\nc"


@pytest.fixture
def followers_text():
    return "alice\nbob\ncarol"
