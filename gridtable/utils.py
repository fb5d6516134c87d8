import argparse

from gridtable.width import Align


ALIGN_NAMES = {
    'l': Align.LEFT,
    'left': Align.LEFT,
    'c': Align.CENTER,
    'center': Align.CENTER,
    'r': Align.RIGHT,
    'right': Align.RIGHT,
}


class ArgumentParser(argparse.ArgumentParser):
    def _parse_alignments(self, aligns: str):
        try:
            return [ALIGN_NAMES[a.strip().lower()] for a in aligns.split(',')]
        except KeyError as e:
            self.error('Unknown alignment {}. Allowed values are {}'.format(
                e.args[0], ' '.join('"{}"'.format(a) for a in ALIGN_NAMES)))

    def _parse_numbers(self, numbers: str, convert=int):
        # empty or "-" entries leave the column at its default
        try:
            return [convert(n) if n.strip() not in ('', '-') else None for n in numbers.split(',')]
        except ValueError:
            self.error('Invalid number list "{}". Try something like "4,-,10"'.format(numbers))

    def _parse_weights(self, weights: str):
        return self._parse_numbers(weights, float)

    def _parse_window(self, window: str):
        offset, _, count = window.partition(':')
        try:
            offset, count = int(offset or 0), int(count) if count else None
        except ValueError:
            offset, count = -1, None
        if offset < 0 or (count is not None and count < 0):
            self.error('Invalid window "{}". Try something like "10:20" or "5:"'.format(window))
        return offset, count

    def _parse_padding(self, padding: str):
        values = self._parse_numbers(padding)
        if len(values) == 1:
            values = values * 2
        if len(values) != 2 or None in values or min(values) < 0:
            self.error('Invalid padding "{}". Try something like "1" or "0,2"'.format(padding))
        return tuple(values)
