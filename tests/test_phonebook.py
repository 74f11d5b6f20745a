from labtasks.phonebook import PhoneBookReport


def test_first_press_report():
    report = PhoneBookReport().press()
    assert report == (
        "Нажатие #1 \n"
        "Книга 1:\n"
        "Иванов_1: 111-111\n"
        "Петров_1: 222-222\n"
        "Книга 2:\n"
        "Козлов_1: 444-444\n"
        "Сидоров_1: 333-333\n"
    )


def test_counter_increases():
    book = PhoneBookReport()
    book.press()
    second = book.press()
    assert second.startswith("Нажатие #2 \n")
    assert "Иванов_2: 111-111" in second
    assert book.presses == 2


def test_entries_sorted_by_name_within_book():
    report = PhoneBookReport().press()
    lines = report.splitlines()
    second_book = lines[lines.index("Книга 2:") + 1:]
    assert second_book == sorted(second_book)
    assert second_book[0].startswith("Козлов_")


def test_history_and_text():
    book = PhoneBookReport()
    first = book.press()
    second = book.press()
    assert book.history == [first, second]
    assert book.text == first + "\n" + second


def test_instances_are_independent():
    one = PhoneBookReport()
    one.press()
    one.press()
    other = PhoneBookReport()
    assert other.press().startswith("Нажатие #1 \n")