import pytest

from vcal_compat import Attachment, AudioAlarm, apply_attachment, build_attachment


class TestBuildAttachment:
    def test_inline_data(self):
        attachment = build_attachment(AudioAlarm(data=b"RIFF", parameters={"TYPE": "WAVE"}))
        assert attachment.content_type == "audio/wave"
        assert attachment.data == b"RIFF"
        assert attachment.uri is None

    def test_data_wins_over_content_id(self):
        attachment = build_attachment(AudioAlarm(data=b"x", content_id="abc"))
        assert attachment.data == b"x"
        assert attachment.uri is None

    def test_content_id(self):
        attachment = build_attachment(AudioAlarm(content_id="abc", uri="http://example.com/ding.wav"))
        assert attachment.uri == "CID:abc"
        assert attachment.data is None

    def test_uri(self):
        attachment = build_attachment(AudioAlarm(uri="http://example.com/ding.wav"))
        assert attachment.uri == "http://example.com/ding.wav"
        assert attachment.content_type is None

    def test_nothing_to_attach(self):
        assert build_attachment(AudioAlarm()) == Attachment()


class TestApplyAttachment:
    def test_content_id_round_trip(self):
        attachment = build_attachment(AudioAlarm(content_id="abc"))
        assert attachment.uri == "CID:abc"

        aalarm = apply_attachment(attachment, AudioAlarm())
        assert aalarm.content_id == "abc"
        assert aalarm.uri is None

    def test_cid_prefix_any_case(self):
        aalarm = apply_attachment(Attachment(uri="cid:part1@example.com"), AudioAlarm())
        assert aalarm.content_id == "part1@example.com"

    def test_plain_uri(self):
        aalarm = apply_attachment(Attachment(uri="ftp://example.com/pub/sounds/bell-01.aud"), AudioAlarm())
        assert aalarm.uri == "ftp://example.com/pub/sounds/bell-01.aud"
        assert aalarm.content_id is None

    def test_inline_data(self):
        aalarm = apply_attachment(Attachment(data=b"\x00\x01"), AudioAlarm())
        assert aalarm.data == b"\x00\x01"

    def test_content_type_stored_raw(self):
        aalarm = apply_attachment(Attachment(content_type="audio/basic", uri="x"), AudioAlarm())
        assert aalarm.type == "audio/basic"
        assert aalarm.parameters == {"TYPE": "audio/basic"}

    def test_no_content_type_removes_type(self):
        aalarm = apply_attachment(Attachment(uri="x"), AudioAlarm(parameters={"TYPE": "WAVE"}))
        assert "TYPE" not in aalarm.parameters


class TestAttachmentInvariant:
    def test_data_and_uri_rejected(self):
        with pytest.raises(ValueError):
            Attachment(data=b"x", uri="http://example.com")
