import re

# Tiêu đề bắt buộc ở dòng đầu tiên của bảng
TIEU_DE_DAU = "Đầu"
TIEU_DE_DUOI = "Đuôi"

_SO_NGUYEN = re.compile(r"[+-]?[0-9]+")


class FormatError(ValueError):
    """Dữ liệu dán vào không đúng định dạng bảng Đầu - Đuôi."""


def doc_so_nguyen(chuoi):
    """
    Đọc số nguyên ở đầu chuỗi (giống parseInt của trình duyệt):
    "7" -> 7, " 3a" -> 3, "abc" -> None
    """
    khop = _SO_NGUYEN.match(chuoi.strip())
    if not khop:
        return None
    return int(khop.group())


def _cac_dong_hop_le(raw_text, thong_bao_trong, thong_bao_sai):
    lines = [line for line in (raw_text or "").split("\n") if line.strip() != ""]

    if len(lines) < 1:
        raise FormatError(thong_bao_trong)
    if TIEU_DE_DAU not in lines[0] or TIEU_DE_DUOI not in lines[0]:
        raise FormatError(thong_bao_sai)
    return lines[1:]


def tach_dau_duoi(line):
    """Tách 1 dòng thành (chuỗi đầu, chuỗi đuôi). Ưu tiên tab, sau đó khoảng trắng."""
    line = line.strip()
    tab_index = line.find("\t")
    space_index = line.find(" ")

    if tab_index != -1:
        return line[:tab_index].strip(), line[tab_index + 1:].strip()
    if space_index != -1:
        return line[:space_index].strip(), line[space_index + 1:].strip()
    # Không có tab lẫn khoảng trắng: cả dòng là đầu, đuôi rỗng
    return line, ""


def _doc_dong(lines):
    for line in lines:
        head_str, tail_str = tach_dau_duoi(line)

        head = doc_so_nguyen(head_str)
        if head is None or head < 0 or head > 9:
            # Bỏ qua dòng không phải đầu số hợp lệ (0-9)
            continue

        tails = []
        if tail_str:
            for s in tail_str.split(","):
                n = doc_so_nguyen(s)
                if n is not None:
                    tails.append(n)
        yield head, tails


def parse_bang_dau_duoi(raw_text):
    """
    Parse bảng Đầu - Đuôi dán từ trang kết quả.

    Input:
        Đầu    Đuôi
        0      1,2
        1              <- đầu câm
        2      3,3,9
    Output:
        {0: [1, 2], 1: [], 2: [3, 3, 9]}

    Đầu không có trong bảng sẽ không có trong kết quả.
    """
    lines = _cac_dong_hop_le(
        raw_text,
        "Dữ liệu không được để trống.",
        'Định dạng dữ liệu không đúng. Phải có "Đầu Đuôi" ở dòng đầu.',
    )
    result = {}
    for head, tails in _doc_dong(lines):
        result[head] = tails
    return result


def parse_ket_qua_thuc(raw_text):
    """Parse bảng kết quả thật để đối chiếu, trả về list số 2 chữ số đã sort, không trùng."""
    lines = _cac_dong_hop_le(
        raw_text,
        "Dữ liệu đối chiếu không được để trống.",
        'Định dạng dữ liệu đối chiếu không đúng. Phải có "Đầu Đuôi" ở dòng đầu.',
    )
    numbers = set()
    for head, tails in _doc_dong(lines):
        for tail in tails:
            if 0 <= tail <= 9:
                numbers.add(head * 10 + tail)
    return sorted(numbers)


def tao_bang_dau_duoi(parsed, giu_dau_cam=True):
    """
    Xuất lại bảng Đầu - Đuôi từ dict {đầu: [đuôi]}.
    giu_dau_cam=False thì bỏ các dòng đầu câm (list rỗng).
    """
    lines = [f"{TIEU_DE_DAU}\t{TIEU_DE_DUOI}"]
    for head in sorted(parsed):
        tails = parsed[head]
        if tails:
            lines.append(f"{head}\t{','.join(str(t) for t in tails)}")
        elif giu_dau_cam:
            lines.append(str(head))
    return "\n".join(lines) + "\n"
