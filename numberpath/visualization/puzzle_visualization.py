import plotly.graph_objects as go


def generate_puzzle_visualization(puzzle, path=None, title=None):
    """
    Generate a Plotly figure of a puzzle: cells, obstacles, hint numbers and a path line.
    `puzzle` is a PuzzleInstance, `path` defaults to the full solution.
    """
    rows, cols = puzzle.rows, puzzle.cols
    path = list(puzzle.full_path) if path is None else list(path)

    fig = go.Figure()

    # grid cells (row 0 at the top)
    free_x, free_y = [], []
    for r in range(rows):
        for c in range(cols):
            if (r, c) not in puzzle.obstacles:
                free_x.append(c)
                free_y.append(r)
    fig.add_trace(go.Scatter(
        x=free_x, y=free_y, mode="markers",
        marker=dict(symbol="square", size=48, color="white", line=dict(width=2, color="#ccc")),
        hoverinfo="skip", name="Cells"
    ))

    obstacles = sorted(puzzle.obstacles)
    if obstacles:
        fig.add_trace(go.Scatter(
            x=[c for _, c in obstacles], y=[r for r, _ in obstacles], mode="markers",
            marker=dict(symbol="square", size=48, color="#333"),
            name="Obstacles"
        ))

    # path line
    if path:
        fig.add_trace(go.Scatter(
            x=[c for _, c in path], y=[r for r, _ in path],
            mode="lines",
            line=dict(width=6, color="#4a90d9"),
            name="Path"
        ))

    hints = sorted(puzzle.hints.items(), key=lambda item: item[1])
    fig.add_trace(go.Scatter(
        x=[pos[1] for pos, _ in hints], y=[pos[0] for pos, _ in hints],
        mode="markers+text",
        text=[str(step) for _, step in hints], textposition="middle center",
        marker=dict(size=30, color="#f5c542", line=dict(width=2, color="black")),
        name="Hints"
    ))

    fig.update_layout(
        title=title or f"{rows}x{cols} {puzzle.topology.value} puzzle",
        showlegend=False,
        plot_bgcolor="white",
        xaxis=dict(visible=False, range=[-0.5, cols - 0.5]),
        yaxis=dict(visible=False, range=[rows - 0.5, -0.5], scaleanchor="x"),
        height=120 + 60 * rows,
        width=120 + 60 * cols,
    )

    return fig
