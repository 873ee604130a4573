from perfect_maze.core.maze import Maze

class MazeAnalyzer:
    @staticmethod
    def open_walls(maze: Maze) -> int:
        """Number of carved walls, i.e. OPEN cells that are not rooms."""
        count = 0
        for i in range(maze.height):
            for j in range(maze.width):
                if not Maze.is_room(i, j) and maze.at(i, j) == Maze.OPEN:
                    count += 1
        return count

    @staticmethod
    def room_degree(maze: Maze, i: int, j: int) -> int:
        degree = 0
        for di, dj in Maze.DIRECTIONS:
            if maze.at(i + di, j + dj) == Maze.OPEN:
                degree += 1
        return degree

    @staticmethod
    def calculate_stats(maze: Maze):
        dead_ends = 0
        corridors = 0
        junctions = 0  # 3+ exits

        for i, j in maze.rooms():
            degree = MazeAnalyzer.room_degree(maze, i, j)
            if degree == 1: dead_ends += 1
            elif degree == 2: corridors += 1
            elif degree >= 3: junctions += 1

        total = maze.room_count
        return {
            "rooms": total,
            "open_walls": MazeAnalyzer.open_walls(maze),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def is_connected(maze: Maze) -> bool:
        """Flood fill from (1, 1) through open walls; every room must be reached."""
        seen = {(1, 1)}
        stack = [(1, 1)]
        while stack:
            ci, cj = stack.pop()
            for ni, nj, wi, wj in maze.room_neighbors(ci, cj):
                if maze.at(wi, wj) == Maze.OPEN and (ni, nj) not in seen:
                    seen.add((ni, nj))
                    stack.append((ni, nj))
        return len(seen) == maze.room_count

    @staticmethod
    def is_perfect(maze: Maze) -> bool:
        """Connected with exactly rooms - 1 walls open -> spanning tree."""
        if MazeAnalyzer.open_walls(maze) != maze.room_count - 1:
            return False
        return MazeAnalyzer.is_connected(maze)
