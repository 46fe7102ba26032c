from algodrills.techmahindra import shift_encrypt, total_tax, unique_sorted


def test_total_tax_example():
    assert total_tax([1000, 2000, 3000, 4000, 5000]) == 1000


def test_total_tax_nothing_taxable():
    assert total_tax([]) == 0
    assert total_tax([500, 1000]) == 0


def test_total_tax_is_additive():
    assert total_tax([2000, 3000]) == total_tax([2000]) + total_tax([3000])


def test_unique_sorted_example():
    assert unique_sorted([1, 1, 2, 3, 4, 2, 4]) == [1, 2, 3, 4]


def test_unique_sorted_idempotent():
    values = [5, -1, 5, 3, 3]
    once = unique_sorted(values)
    assert unique_sorted(once) == once
    assert set(once) == set(values)


def test_shift_encrypt_example():
    assert shift_encrypt("nmacd") == "qpdfg"


def test_shift_encrypt_shifts_each_character():
    text = "Hello, World"
    result = shift_encrypt(text)
    assert len(result) == len(text)
    assert all(ord(new) - ord(old) == 3 for old, new in zip(text, result))


def test_shift_encrypt_empty():
    assert shift_encrypt("") == ""