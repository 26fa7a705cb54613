from uuid import uuid4


def new_game(client, **body):
    response = client.post("/games/", json=body or {"level": 1})
    assert response.status_code == 201
    return response.json()


def solution_of(client, game):
    return client.get(f"/puzzles/{game['puzzle_id']}").json()["full_path"]


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Number Path" in response.text


def test_level_settings(client):
    response = client.get("/puzzles/levels/3")
    assert response.status_code == 200
    data = response.json()
    assert (data["rows"], data["cols"]) == (3, 4)
    assert data["tier"] == "easy"


def test_generate_puzzle_from_size(client):
    response = client.post("/puzzles/generate", json={"rows": 3, "cols": 3, "hidden_rate": 0.5})
    assert response.status_code == 201
    puzzle = response.json()
    assert len(puzzle["full_path"]) == 9
    assert len(puzzle["hints"]) == 5
    for hint in puzzle["hints"]:
        assert puzzle["full_path"][hint["step"] - 1] == [hint["row"], hint["col"]]

    fetched = client.get(f"/puzzles/{puzzle['id']}").json()
    assert fetched == puzzle


def test_generate_puzzle_from_level(client):
    response = client.post("/puzzles/generate", json={"level": 5, "topology": "diagonal"})
    assert response.status_code == 201
    puzzle = response.json()
    assert (puzzle["rows"], puzzle["cols"], puzzle["level"]) == (4, 4, 5)
    assert puzzle["topology"] == "diagonal"


def test_generate_needs_level_or_size(client):
    assert client.post("/puzzles/generate", json={"rows": 3}).status_code == 422
    assert client.post("/puzzles/generate", json={"level": 1, "topology": "hex"}).status_code == 422


def test_generation_failure_is_reported(client):
    response = client.post("/puzzles/generate", json={"rows": 1, "cols": 1, "obstacle_count": 1})
    assert response.status_code == 503
    assert "could not be generated" in response.json()["detail"]


def test_puzzle_figure(client):
    puzzle = client.post("/puzzles/generate", json={"rows": 2, "cols": 3}).json()
    response = client.get(f"/puzzles/{puzzle['id']}/figure")
    assert response.status_code == 200
    assert response.json()["data"]


def test_unknown_ids(client):
    assert client.get(f"/puzzles/{uuid4()}").status_code == 404
    assert client.get(f"/games/{uuid4()}").status_code == 404
    assert client.post(f"/games/{uuid4()}/reset").status_code == 404


def test_new_game_hides_the_solution(client):
    game = new_game(client)
    assert game["status"] == "playing"
    assert game["level"] == 1
    assert game["full_path"] is None
    assert game["user_path"] == []
    assert len(game["board"]) == 3 and len(game["board"][0]) == 3
    assert client.get(f"/games/{game['id']}").json() == game


def test_drawing_the_solution_wins(client):
    game = new_game(client)
    solution = solution_of(client, game)
    response = client.put(f"/games/{game['id']}/path", json={"path": solution})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "won"
    assert data["full_path"] == solution

    # finished games reject edits
    response = client.put(f"/games/{game['id']}/path", json={"path": solution})
    assert response.status_code == 409


def test_dragging_the_solution_wins(client):
    game = new_game(client)
    for row, col in solution_of(client, game):
        response = client.post(f"/games/{game['id']}/moves", json={"row": row, "col": col})
        assert response.status_code == 200
        assert response.json()["changed"] is True
    assert response.json()["game"]["status"] == "won"


def test_invalid_path_is_rejected(client):
    game = new_game(client)
    response = client.put(f"/games/{game['id']}/path", json={"path": [[0, 0], [2, 2]]})
    assert response.status_code == 422


def test_reset(client):
    game = new_game(client)
    first = solution_of(client, game)[0]
    client.post(f"/games/{game['id']}/moves", json={"row": first[0], "col": first[1]})
    data = client.post(f"/games/{game['id']}/reset").json()
    assert data["user_path"] == []
    assert data["status"] == "playing"


def test_level_navigation(client):
    game = new_game(client)
    assert client.post(f"/games/{game['id']}/prev").status_code == 400

    data = client.post(f"/games/{game['id']}/next").json()
    assert data["level"] == 2
    assert data["puzzle_id"] != game["puzzle_id"]

    data = client.post(f"/games/{game['id']}/prev").json()
    assert data["level"] == 1

    data = client.post(f"/games/{game['id']}/jump", json={"level": 3}).json()
    assert (data["level"], data["rows"], data["cols"]) == (3, 3, 4)

    data = client.post(f"/games/{game['id']}/jump", json={"level": 0}).json()
    assert data["level"] == 1


def test_hint_and_answer(client):
    game = new_game(client, level=1, topology="diagonal")
    assert game["topology"] == "diagonal"
    response = client.post(f"/games/{game['id']}/hint")
    assert response.status_code == 200
    data = response.json()
    shown = {hint["step"] for hint in game["hints"]}
    assert data["hint"]["step"] == min(set(range(1, 10)) - shown)
    assert len(data["game"]["hints"]) == len(game["hints"]) + 1

    data = client.post(f"/games/{game['id']}/answer").json()
    assert data["status"] == "lost"
    assert data["user_path"] == data["full_path"]
    assert client.post(f"/games/{game['id']}/hint").status_code == 409


def test_board_page_and_figure(client):
    game = new_game(client)
    response = client.get(f"/games/{game['id']}/board")
    assert response.status_code == 200
    assert "Level 1" in response.text
    figure = client.get(f"/games/{game['id']}/figure")
    assert figure.status_code == 200
    assert "data" in figure.json()


def test_answer_after_win_is_rejected(client):
    game = new_game(client)
    won = client.put(f"/games/{game['id']}/path", json={"path": solution_of(client, game)}).json()
    assert won["status"] == "won"

    response = client.post(f"/games/{game['id']}/answer")
    assert response.status_code == 409
    data = client.get(f"/games/{game['id']}").json()
    assert data["status"] == "won"
    assert data["user_path"] == won["user_path"]
