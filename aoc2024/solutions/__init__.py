"""Puzzle solutions, one module per day, each with part_one, part_two and main."""