from seqrotate.dispatch import rotate
from seqrotate.utils import withlogger

@withlogger
class BlockShift:
    """
    Get a callable object that shifts (in-place) a contiguous block of
    an indexable mutable sequence to a different index in that
    sequence. The length of the sequence must not change so long as
    the BlockShift object is in use.

    Only the items between the block and its destination are touched:
    the move is a single rotation of that affected range, and undoing
    it is the rotation around the position the first one returned.
    """
    def __init__(self, sequence, idx_block_start, idx_block_end,
                 idx_dest):
        """

        :param sequence: a list, or any tier collection using int
            positions (e.g. ArrayCollection)
        :param idx_block_start: start of shifted block
        :param idx_block_end: end of shifted block (inclusive)
        :param idx_dest: destination index; where the starting item
            should end up after the shift. Clamped so that the whole
            block stays inside the sequence.
        """
        length = len(sequence)

        if idx_block_end < idx_block_start:
            raise ValueError("Block end precedes block start")
        if idx_block_start < 0 or idx_block_end >= length:
            raise IndexError(idx_block_start, idx_block_end,
                             "Block extends beyond the sequence")

        self.list = sequence

        ## calculations ##
        self._count = 1 + idx_block_end - idx_block_start

        # keep the block inside the sequence
        idx_dest = max(0, min(idx_dest, length - self._count))

        if idx_dest < idx_block_start:  # moving UP:
            # block goes to the front of [dest, block end]
            first, middle, last = idx_dest, idx_block_start, idx_block_end + 1
        else:  # moving DOWN (or nowhere):
            # what follows the block goes to the front of
            # [block start, dest + count)
            first, middle, last = idx_block_start, idx_block_end + 1, idx_dest + self._count

        self._first, self._middle, self._last = first, middle, last

        # the middle to rotate around to put everything back; this is
        # exactly what the forward rotation returns
        self._rmiddle = first + (last - middle)

        ## properties ##
        # the variables that start with '_r' are the "reverse" version
        # of the variable; i.e. the value when shifting in the opposite
        # direction

        # first index of the block
        self._bstart = idx_block_start
        self._rbstart = idx_dest

        # last index of the block
        self._bend = idx_block_end
        self._rbend = idx_dest + self._count - 1

        # where the first item of the block ends up
        self._newbstart = idx_dest
        self._rnewbstart = idx_block_start

        ## this is the totality of the affected indices; includes the
        ## main block itself and any other items that had to be moved
        ## to accommodate the shift
        self.affected_range = range(first, last)

    def block_start(self, reverse=False):
        """The first index of the block to be shifted"""
        return self._rbstart if reverse else self._bstart

    def block_end(self, reverse=False):
        """The last index of the block to be shifted"""
        return self._rbend if reverse else self._bend

    def block_dest(self, reverse=False):
        """
        :return: the destination of the block, or where the first item
            will be located after the shift is performed
        """
        return self._rnewbstart if reverse else self._newbstart

    def __call__(self, reverse=False):
        """

        :param reverse: perform the shift in the opposite direction
            ("undo" the shift, assuming it has already been
            performed once in the forward direction)
        :return: the position rotate() returned for the affected range
        """
        middle = self._rmiddle if reverse else self._middle

        self.LOGGER.debug("shift %s around %s (reverse=%s)",
                          self.affected_range, middle, reverse)

        return rotate(self.list, middle, self._first, self._last)
