import pytest

from skinsheets.archive import SkinSource, find_skin_files, read_skin_archive
from skinsheets.catalog import Sheet
from skinsheets.errors import InvalidArchiveError, SkinError, SkinNotFoundError

from conftest import bmp_bytes, make_wsz, mark_encrypted

MAIN = bmp_bytes(275, 116)


def test_reads_bitmaps_at_root():
    source = read_skin_archive(make_wsz({'MAIN.BMP': MAIN, 'CBUTTONS.BMP': b'x'}))
    assert Sheet.MAIN in source
    assert Sheet.CBUTTONS in source
    assert source.get(Sheet.MAIN) == MAIN
    assert source.get(Sheet.PLEDIT) is None


def test_reads_bitmaps_in_single_folder():
    source = read_skin_archive(make_wsz({
        'MySkin/main.bmp': MAIN,
        'MySkin/readme.txt': b'hello',
    }))
    assert source.get(Sheet.MAIN) == MAIN


def test_names_are_case_insensitive():
    source = read_skin_archive(make_wsz({'Main.Bmp': MAIN, 'eq_ex.BMP': b'eq'}))
    assert source.get(Sheet.MAIN) == MAIN
    assert source.get(Sheet.EQ_EX) == b'eq'


def test_config_file_is_picked_up():
    source = read_skin_archive(make_wsz({'MAIN.BMP': MAIN, 'pledit.txt': b'[Text]\n'}))
    assert source.config_text == b'[Text]\n'


def test_config_file_absent():
    assert read_skin_archive(make_wsz({'MAIN.BMP': MAIN})).config_text is None


def test_macosx_entries_are_ignored():
    source = read_skin_archive(make_wsz({
        'Skin/MAIN.BMP': MAIN,
        '__MACOSX/Skin/._MAIN.BMP': b'resource fork',
    }))
    assert source.get(Sheet.MAIN) == MAIN


@pytest.mark.parametrize('entry', ['../evil.bmp', '/abs.bmp', 'skin/../../evil.bmp', 'C:\\evil.bmp'])
def test_entries_escaping_root_are_rejected(entry):
    with pytest.raises(InvalidArchiveError):
        read_skin_archive(make_wsz({'MAIN.BMP': MAIN, entry: b'evil'}))


def test_non_zip_data_is_rejected():
    with pytest.raises(InvalidArchiveError):
        read_skin_archive(b'this is not a zip file')


def test_missing_path(tmp_path):
    path = tmp_path / 'missing.wsz'
    with pytest.raises(SkinNotFoundError) as excinfo:
        read_skin_archive(path)
    assert isinstance(excinfo.value, FileNotFoundError)
    assert isinstance(excinfo.value, SkinError)
    assert excinfo.value.path == str(path)


def test_reads_from_path_and_names_source(tmp_path):
    path = tmp_path / 'Green Dimension.wsz'
    path.write_bytes(make_wsz({'MAIN.BMP': MAIN}))
    source = read_skin_archive(path)
    assert source.name == 'Green Dimension'
    assert Sheet.MAIN in source


def test_root_wins_over_folder():
    files = find_skin_files(['MAIN.BMP', 'Skin/MAIN.BMP'])
    assert files == {'MAIN.BMP': 'MAIN.BMP'}


def test_several_folders_fall_back_to_root():
    files = find_skin_files(['a/MAIN.BMP', 'b/MAIN.BMP', 'pledit.txt', 'readme.txt'])
    assert files == {'pledit.txt': 'pledit.txt'}


def test_nested_subfolders_are_not_searched():
    assert find_skin_files(['Skin/deeper/MAIN.BMP']) == {}


def test_only_skin_files_are_selected():
    files = find_skin_files(['Skin/Main.bmp', 'Skin/readme.txt', 'Skin/PLEDIT.TXT', 'Skin/AVS.BMP'])
    assert files == {'Main.bmp': 'Skin/Main.bmp', 'PLEDIT.TXT': 'Skin/PLEDIT.TXT'}


def test_encrypted_unrelated_entry_is_not_read():
    data = make_wsz({'MAIN.BMP': MAIN, 'readme.txt': b'secret'})
    source = read_skin_archive(mark_encrypted(data, 'readme.txt'))
    assert source.get(Sheet.MAIN) == MAIN


def test_entries_outside_skin_folder_are_not_read():
    data = make_wsz({'Skin/MAIN.BMP': MAIN, 'Skin/extras/big.bin': b'x' * 64})
    source = read_skin_archive(mark_encrypted(data, 'Skin/extras/big.bin'))
    assert source.get(Sheet.MAIN) == MAIN


def test_encrypted_skin_file_is_rejected():
    data = make_wsz({'MAIN.BMP': MAIN, 'PLEDIT.TXT': b'[Text]\n'})
    with pytest.raises(InvalidArchiveError):
        read_skin_archive(mark_encrypted(data, 'MAIN.BMP'))


def test_from_files_first_match_wins():
    source = SkinSource.from_files({'MAIN.BMP': b'first', 'main.bmp': b'second'})
    assert source.get(Sheet.MAIN) == b'first'


def test_from_files_ignores_unknown_files():
    source = SkinSource.from_files({'AVS.BMP': b'', 'viscolor.txt': b'', 'MB.BMP': b'mb'})
    assert list(source.bitmaps) == [Sheet.MB]
