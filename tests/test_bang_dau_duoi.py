import pytest

from app.utils.bang_dau_duoi import (
    FormatError,
    doc_so_nguyen,
    parse_bang_dau_duoi,
    parse_ket_qua_thuc,
    tach_dau_duoi,
    tao_bang_dau_duoi,
)


def test_parse_bang_mau(bang_mau):
    assert parse_bang_dau_duoi(bang_mau) == {0: [1, 2], 1: [], 2: [3, 3, 9]}


def test_dau_khong_co_trong_bang_thi_khong_co_trong_ket_qua(bang_mau):
    parsed = parse_bang_dau_duoi(bang_mau)
    assert 5 not in parsed


@pytest.mark.parametrize("line, expected", [
    ("3\t1,2", ("3", "1,2")),
    ("3 1,2", ("3", "1,2")),
    ("3 \t1, 2", ("3", "1, 2")),
    ("3", ("3", "")),
    ("  4\t  ", ("4", "")),
])
def test_tach_dau_duoi(line, expected):
    assert tach_dau_duoi(line) == expected


def test_dung_khoang_trang_khi_khong_co_tab():
    raw = "Đầu Đuôi\n0 1,2\n3 4, 5 ,6\n"
    assert parse_bang_dau_duoi(raw) == {0: [1, 2], 3: [4, 5, 6]}


def test_bo_qua_dong_dau_khong_hop_le():
    raw = (
        "Đầu\tĐuôi\n"
        "x\t1,2\n"
        "12\t3\n"
        "-1\t4\n"
        "7\t8\n"
    )
    assert parse_bang_dau_duoi(raw) == {7: [8]}


def test_bo_qua_duoi_khong_phai_so():
    raw = "Đầu\tĐuôi\n4\t1, a, ,3\n"
    assert parse_bang_dau_duoi(raw) == {4: [1, 3]}


def test_doc_so_nguyen_giong_parse_int():
    assert doc_so_nguyen(" 7 ") == 7
    assert doc_so_nguyen("3a") == 3
    assert doc_so_nguyen("-2") == -2
    assert doc_so_nguyen("abc") is None
    assert doc_so_nguyen("") is None


def test_bo_qua_dong_trong():
    raw = "\n\nĐầu\tĐuôi\n\n0\t5\n   \n9\t9\n"
    assert parse_bang_dau_duoi(raw) == {0: [5], 9: [9]}


def test_dong_sau_ghi_de_dong_truoc_cung_dau():
    raw = "Đầu\tĐuôi\n2\t1\n2\t3,4\n"
    assert parse_bang_dau_duoi(raw) == {2: [3, 4]}


@pytest.mark.parametrize("raw", ["", "   \n\n", None])
def test_du_lieu_trong(raw):
    with pytest.raises(FormatError, match="không được để trống"):
        parse_bang_dau_duoi(raw)


@pytest.mark.parametrize("header", ["Dau\tDuoi", "Đầu", "Đuôi", "đầu\tđuôi", "0\t1,2"])
def test_thieu_tieu_de(header):
    with pytest.raises(FormatError, match="Đầu Đuôi"):
        parse_bang_dau_duoi(f"{header}\n1\t2\n")


def test_parse_ket_qua_thuc():
    raw = "Đầu\tĐuôi\n0\t5,5\n1\t7,2\n4\n9\t9,12,-1\n"
    assert parse_ket_qua_thuc(raw) == [5, 12, 17, 99]


def test_parse_ket_qua_thuc_thieu_tieu_de():
    with pytest.raises(FormatError, match="đối chiếu"):
        parse_ket_qua_thuc("0\t1,2\n")
    with pytest.raises(FormatError, match="đối chiếu"):
        parse_ket_qua_thuc("")


def test_tao_bang_giu_dau_cam_roi_parse_lai(bang_mau):
    parsed = parse_bang_dau_duoi(bang_mau)
    raw = tao_bang_dau_duoi(parsed)
    assert raw == "Đầu\tĐuôi\n0\t1,2\n1\n2\t3,3,9\n"
    assert parse_bang_dau_duoi(raw) == parsed


def test_tao_bang_bo_dau_cam_roi_parse_lai(bang_mau):
    parsed = parse_bang_dau_duoi(bang_mau)
    raw = tao_bang_dau_duoi(parsed, giu_dau_cam=False)
    assert "\n1\n" not in raw
    assert parse_bang_dau_duoi(raw) == {0: [1, 2], 2: [3, 3, 9]}


def test_tao_bang_day_du_parse_lai(bang_day_du):
    parsed = parse_bang_dau_duoi(bang_day_du)
    assert parse_bang_dau_duoi(tao_bang_dau_duoi(parsed)) == parsed


@pytest.mark.parametrize("chuoi", ["٣", "３", "๓"])
def test_chu_so_ngoai_ascii_khong_phai_so(chuoi):
    assert doc_so_nguyen(chuoi) is None


def test_bo_qua_dau_duoi_viet_bang_chu_so_khac():
    raw = "Đầu\tĐuôi\n٣\t1\n4\t٥,6\n"
    assert parse_bang_dau_duoi(raw) == {4: [6]}
