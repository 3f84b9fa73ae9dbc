import pytest

from skinsheets.bitmap import Color
from skinsheets.config import IniDocument, SkinConfig, parse_color, parse_skin_config
from skinsheets.errors import InvalidConfigurationError


class TestIniDocument:

    def test_sections_and_values(self):
        document = IniDocument.parse("[Text]\nNormal=#00FF00\nFont=Arial\n")
        assert document.value('Text', 'Normal') == '#00FF00'
        assert document.value('Text', 'Font') == 'Arial'

    def test_splits_on_first_equals(self):
        document = IniDocument.parse("[Text]\nFont=Tahoma=Bold\n")
        assert document.value('Text', 'Font') == 'Tahoma=Bold'

    def test_whitespace_is_trimmed(self):
        document = IniDocument.parse("  [Text]  \n  Normal  =  #123456  \n")
        assert document.value('Text', 'Normal') == '#123456'

    def test_comments_and_blank_lines_are_skipped(self):
        document = IniDocument.parse("; comment\n\n[Text]\n# another\nFont=Arial\n")
        assert document.section('Text') == {'Font': 'Arial'}

    def test_lines_before_first_section_are_discarded(self):
        document = IniDocument.parse("Font=Courier\n[Text]\nNormal=#000000\n")
        assert document.section('Text') == {'Normal': '#000000'}
        assert document.value('Text', 'Font') is None

    def test_last_value_wins(self):
        document = IniDocument.parse("[Text]\nFont=Arial\nFont=Verdana\n")
        assert document.value('Text', 'Font') == 'Verdana'

    def test_lines_without_equals_are_ignored(self):
        document = IniDocument.parse("[Text]\ngarbage\nFont=Arial\n")
        assert document.section('Text') == {'Font': 'Arial'}

    def test_windows_line_endings(self):
        document = IniDocument.parse("[Text]\r\nFont=Arial\r\n")
        assert document.value('Text', 'Font') == 'Arial'

    def test_missing_section(self):
        assert IniDocument.parse("").section('Text') == {}


class TestParseColor:

    @pytest.mark.parametrize('text', ['#FF8000', 'FF8000', 'ff8000', '#ff8000'])
    def test_six_digit_forms(self, text):
        assert parse_color(text).to_rgb8() == (255, 128, 0)

    @pytest.mark.parametrize('text', ['#F80', 'f80'])
    def test_three_digit_forms(self, text):
        assert parse_color(text).to_rgb8() == (255, 136, 0)

    @pytest.mark.parametrize('text', ['', '#', 'GGGGGG', '#12345', '0x1234', '#1234567', 'red'])
    def test_invalid_forms(self, text):
        assert parse_color(text) is None


class TestParseSkinConfig:

    def test_full_text_section(self):
        config = parse_skin_config(
            b"[Text]\nNormal=#FF0000\nCurrent=#00FF00\nNormalBG=#0000FF\n"
            b"SelectedBG=#FFFFFF\nFont=Tahoma\n"
        )
        assert config.normal_text_color == Color(1.0, 0.0, 0.0)
        assert config.current_text_color == Color(0.0, 1.0, 0.0)
        assert config.normal_background_color == Color(0.0, 0.0, 1.0)
        assert config.selected_background_color == Color(1.0, 1.0, 1.0)
        assert config.font_name == 'Tahoma'

    def test_empty_input_gives_defaults(self):
        assert parse_skin_config(b'') == SkinConfig.DEFAULT
        assert parse_skin_config('') == SkinConfig.DEFAULT

    def test_fields_default_independently(self):
        config = parse_skin_config("[Text]\nNormal=nonsense\nCurrent=#000000\n")
        assert config.normal_text_color == SkinConfig.DEFAULT.normal_text_color
        assert config.current_text_color == Color(0.0, 0.0, 0.0)
        assert config.font_name == 'Arial'

    def test_empty_font_is_kept(self):
        assert parse_skin_config("[Text]\nFont=\n").font_name == ''

    def test_missing_font_uses_default(self):
        assert parse_skin_config("[Text]\nNormal=#000000\n").font_name == 'Arial'

    def test_keys_outside_text_section_are_ignored(self):
        config = parse_skin_config("[Other]\nFont=Courier\n")
        assert config == SkinConfig.DEFAULT

    def test_byte_order_mark_is_accepted(self):
        config = parse_skin_config(b'\xef\xbb\xbf[Text]\nFont=Tahoma\n')
        assert config.font_name == 'Tahoma'

    def test_invalid_utf8_raises(self):
        with pytest.raises(InvalidConfigurationError):
            parse_skin_config(b'[Text]\nFont=\xff\xfe\n')

    def test_default_values(self):
        default = SkinConfig.DEFAULT
        assert default.normal_text_color == Color(0.0, 1.0, 0.0)
        assert default.current_text_color == Color(1.0, 1.0, 1.0)
        assert default.normal_background_color == Color(0.0, 0.0, 0.0)
        assert default.selected_background_color == Color(0.0, 0.0, 0.5)
        assert default.font_name == 'Arial'
