import unittest

from game import (
    AlreadyPairedError,
    Board,
    DuplicatePositionError,
    InputParseError,
    Move,
    MoveError,
    OutOfBoundsError,
    parse_move,
    validate_move,
)


class TestParseMove(unittest.TestCase):
    def test_given_pair_and_plain_forms_when_parsing_then_same_move(self):
        self.assertEqual(parse_move('(2, 1) (2, 3)'), parse_move('2 1 2 3'))
        self.assertEqual(parse_move('2 1 2 3'), Move(2, 1, 2, 3))
        self.assertEqual(tuple(parse_move('(2, 1) (2, 3)')), (2, 1, 2, 3))

    def test_given_noise_between_digits_when_parsing_then_lenient(self):
        self.assertEqual(parse_move('abc0def0ghi0jkl0'), Move(0, 0, 0, 0))
        self.assertEqual(parse_move('   (10,2)->(3,4)   '), Move(10, 2, 3, 4))
        # minus signs are not digits
        self.assertEqual(parse_move('-1 0 0 1'), Move(1, 0, 0, 1))

    def test_given_extra_tokens_when_parsing_then_first_four_kept(self):
        self.assertEqual(parse_move('1 2 3 4 5 6'), Move(1, 2, 3, 4))

    def test_given_too_few_numbers_when_parsing_then_input_parse_error(self):
        for text in ['', 'hello', '1 2 3', '(0, 0)', 'quit']:
            with self.assertRaises(InputParseError):
                parse_move(text)

    def test_given_number_above_int_range_when_parsing_then_input_parse_error(self):
        for text in ['99999999999 0 0 1', '0 0 2147483648 1', '9' * 5000 + ' 1 1 1']:
            with self.assertRaises(InputParseError):
                parse_move(text)
        self.assertEqual(parse_move('2147483647 0 0 1'), Move(2147483647, 0, 0, 1))
        # leading zeros do not count towards the limit
        self.assertEqual(parse_move('000000000001 0 0 1'), Move(1, 0, 0, 1))
        # only the first four numbers are read
        self.assertEqual(parse_move('0 0 0 1 99999999999'), Move(0, 0, 0, 1))

    def test_given_move_when_reading_positions_then_coords(self):
        m = Move(1, 2, 3, 0)
        self.assertEqual(m.first, (1, 2))
        self.assertEqual(m.second, (3, 0))


class TestValidateMove(unittest.TestCase):
    def setUp(self):
        self.board = Board.from_values(2, 2, ['A', 'B', 'B', 'A'])

    def test_given_playable_move_when_validating_then_both_cards_returned(self):
        c1, c2 = validate_move(self.board, Move(0, 0, 1, 1))
        self.assertIs(c1, self.board.get_card(0, 0))
        self.assertIs(c2, self.board.get_card(1, 1))

    def test_given_same_position_twice_when_validating_then_duplicate_error(self):
        with self.assertRaises(DuplicatePositionError):
            validate_move(self.board, Move(0, 0, 0, 0))
        # duplicate is reported before bounds
        with self.assertRaises(DuplicatePositionError):
            validate_move(self.board, Move(5, 5, 5, 5))

    def test_given_position_off_board_when_validating_then_out_of_bounds_error(self):
        with self.assertRaises(OutOfBoundsError):
            validate_move(self.board, Move(5, 5, 0, 0))
        with self.assertRaises(OutOfBoundsError):
            validate_move(self.board, Move(0, 0, 0, 2))

    def test_given_paired_card_when_validating_then_already_paired_error(self):
        self.board.get_card(0, 0).pair(True)
        self.board.get_card(1, 1).pair(True)
        with self.assertRaises(AlreadyPairedError):
            validate_move(self.board, Move(0, 1, 1, 1))
        with self.assertRaises(AlreadyPairedError):
            validate_move(self.board, Move(0, 0, 1, 0))

    def test_given_errors_when_raised_then_carry_player_messages(self):
        self.assertEqual(InputParseError().message, 'Invalid input!')
        self.assertEqual(DuplicatePositionError().message, 'The given positions must be different.')
        self.assertEqual(OutOfBoundsError().message, "The given positions aren't on the board.")
        self.assertEqual(
            AlreadyPairedError().message,
            'One or more of the given cards has already been paired.',
        )
        self.assertTrue(issubclass(OutOfBoundsError, MoveError))
        self.assertTrue(issubclass(MoveError, ValueError))


if __name__ == '__main__':
    unittest.main()
