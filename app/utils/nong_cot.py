from itertools import combinations, islice

from .phan_tich import CAM, YEU

SO_NONG_COT = 20
SO_XIEN3_TOI_DA = 100


def _la_yeu_hoac_it_ve(stat):
    return stat["note"] == YEU or stat["count"] < 3


def tao_so_nong_cot(analysis, strategy):
    """
    Tạo tối đa 20 số nòng cốt từ đầu/đuôi tiềm năng.

    1. Ghép đầu tiềm năng x đuôi tiềm năng: lấy số chưa về kỳ trước,
       hoặc số có cả đầu và đuôi đều câm.
    2. Chưa đủ 20: đầu tiềm năng + đuôi yếu/ít về (chưa về kỳ trước).
    3. Vẫn chưa đủ: đuôi tiềm năng + đầu yếu/ít về (chưa về kỳ trước).
    """
    heads_stat = analysis["heads"]
    tails_stat = analysis["tails"]
    da_ve = set(analysis["allNumbers"])
    heads = list(strategy["potentialHeads"])
    tails = list(strategy["potentialTails"])

    core = set()

    for h in heads:
        for t in tails:
            num = h * 10 + t
            cap_cam = heads_stat[h]["note"] == CAM and tails_stat[t]["note"] == CAM
            if num not in da_ve or cap_cam:
                core.add(num)

    if len(core) < SO_NONG_COT:
        for h in heads:
            for t in range(10):
                num = h * 10 + t
                if num not in core and num not in da_ve and _la_yeu_hoac_it_ve(tails_stat[t]):
                    core.add(num)
                    if len(core) >= SO_NONG_COT:
                        break
            if len(core) >= SO_NONG_COT:
                break

    if len(core) < SO_NONG_COT:
        for t in tails:
            for h in range(10):
                num = h * 10 + t
                if num not in core and num not in da_ve and _la_yeu_hoac_it_ve(heads_stat[h]):
                    core.add(num)
                    if len(core) >= SO_NONG_COT:
                        break
            if len(core) >= SO_NONG_COT:
                break

    return sorted(core)[:SO_NONG_COT]


def tao_xien3(core_numbers):
    """Tạo tối đa 100 bộ xiên 3 theo thứ tự tổ hợp (i < j < k) của dàn nòng cốt."""
    if len(core_numbers) < 3:
        return []
    return [list(bo) for bo in islice(combinations(core_numbers, 3), SO_XIEN3_TOI_DA)]
