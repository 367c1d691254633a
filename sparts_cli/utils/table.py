from typing import List, TextIO


class TabWriter:
    """
    Aligns tab separated text into columns. Every tab terminates a cell, the text after
    the last tab of a line is written as-is. A column is as wide as its widest cell (plus
    padding) within the run of adjacent lines that have that column, so a line without
    tabs starts a new block. With debug on, a '|' is written after each cell.
    """

    def __init__(
        self,
        stream: TextIO,
        padding: int = 1,
        pad_char: str = " ",
        debug: bool = False,
    ) -> None:
        self.__stream = stream
        self.__padding = padding
        self.__pad_char = pad_char
        self.__debug = debug
        self.__buffer = ""

    def write(self, text: str) -> None:
        self.__buffer += text

    def flush(self) -> None:
        lines = self.__buffer.split("\n")
        if lines[-1] == "":
            lines.pop()
        rows = [line.split("\t") for line in lines]
        cells = [row[:-1] for row in rows]
        widths = self.__column_widths(cells)

        for row, row_cells, row_widths in zip(rows, cells, widths):
            out = []
            for cell, width in zip(row_cells, row_widths):
                out.append(cell + self.__pad_char * (width - len(cell)))
                if self.__debug:
                    out.append("|")
            out.append(row[-1])
            self.__stream.write("".join(out) + "\n")
        self.__buffer = ""

    def __column_widths(self, cells: List[List[str]]) -> List[List[int]]:
        widths: List[List[int]] = [[0] * len(row) for row in cells]
        max_columns = max((len(row) for row in cells), default=0)

        for column in range(max_columns):
            start = 0
            while start < len(cells):
                if len(cells[start]) <= column:
                    start += 1
                    continue
                end = start
                while end < len(cells) and len(cells[end]) > column:
                    end += 1
                width = max(len(cells[i][column]) + self.__padding for i in range(start, end))
                for i in range(start, end):
                    widths[i][column] = width
                start = end

        return widths
