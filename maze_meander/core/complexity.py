from maze_meander.core.grid import Grid


class MazeStats:
    @staticmethod
    def calculate_stats(grid: Grid):
        """
        Shape summary of a generated maze. Only visited cells take part;
        reserved start/finish cells and unreached cells count as unvisited.
        """
        dead_ends = 0
        corridors = 0
        intersections = 0
        visited = 0

        for cell in grid.iter_cells():
            if not cell.visited:
                continue
            visited += 1
            links = grid.connections(cell)
            if links == 1:
                dead_ends += 1
            elif links == 2:
                corridors += 1
            elif links >= 3:
                intersections += 1

        total = grid.width * grid.height
        return {
            "visited": visited,
            "unvisited": total - visited,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / visited) * 100 if visited > 0 else 0
        }

    @staticmethod
    def max_depth(grid: Grid) -> int:
        """Length in edges of the longest branch hanging off the start cell."""
        depth = {grid.start: 0}
        best = 0
        stack = [grid.start_cell]
        while stack:
            cell = stack.pop()
            d = depth[cell.pos]
            best = max(best, d)
            for neighbor, direction in grid.get_neighbors(cell):
                if cell.has_edge(direction):
                    depth[neighbor.pos] = d + 1
                    stack.append(neighbor)
        return best
