from falling_blocks.rl.random_agent import build_parser, run_random


def test_summary_reports_cells_left_on_board(capsys):
    total = run_random(episodes=2, max_steps=30, seed=4)
    out = capsys.readouterr().out
    assert out.count("cells_left=") == 2
    assert "Episode 2:" in out
    assert f"Random agent total reward: {total:.2f}" in out


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.episodes, args.max_steps, args.seed, args.show_board) == (1, 5000, None, False)
