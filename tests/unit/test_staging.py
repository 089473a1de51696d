import pytest

from wedexpense.upload.staging import sanitize_file_name, staged_upload


class TestSanitizeFileName:
    def test_replaces_unsafe_characters(self) -> None:
        assert sanitize_file_name("my bill (1)/₹.jpg") == "my_bill__1___.jpg"

    def test_keeps_safe_characters(self) -> None:
        assert sanitize_file_name("Receipt_01-final.PDF") == "Receipt_01-final.PDF"

    def test_empty_name(self) -> None:
        assert sanitize_file_name("") == "upload"

    @pytest.mark.parametrize("name", [".", "..", "..."])
    def test_dot_only_names(self, name: str) -> None:
        assert sanitize_file_name(name) == "upload"

    def test_dotted_name_is_kept(self) -> None:
        assert sanitize_file_name("..hidden.jpg") == "..hidden.jpg"


class TestStagedUpload:
    def test_writes_bytes_and_removes_them(self, binary_payload: bytes) -> None:
        with staged_upload(binary_payload, "scan.png", "image/png") as staged:
            path = staged.path
            assert staged.read_bytes() == binary_payload
            assert staged.file_name == "scan.png"
            assert staged.media_type == "image/png"
        assert not path.exists()
        assert not path.parent.exists()

    def test_removes_scratch_file_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with staged_upload(b"x", "r.jpg", "image/jpeg") as staged:
                path = staged.path
                raise RuntimeError("boom")
        assert not path.exists()

    @pytest.mark.parametrize("name", [".", ".."])
    def test_dot_only_name_is_staged_as_file(self, name: str) -> None:
        with staged_upload(b"jpeg", name, "image/jpeg") as staged:
            assert staged.path.is_file()
            assert staged.path.parent.name.startswith("wedexpense_")
            assert staged.read_bytes() == b"jpeg"
            assert staged.file_name == name

    def test_unsafe_name_stays_inside_scratch_dir(self) -> None:
        with staged_upload(b"x", "../../etc/passwd", "text/plain") as staged:
            assert staged.path.parent.name.startswith("wedexpense_")
            assert staged.path.name == ".._.._etc_passwd"
