def print_info(d, score, nodes, elapsed, move, winning_value):
        move_str = str(move) if move else "-"
        nps = int(nodes / elapsed) if elapsed > 0 else 0

        if score >= winning_value:
            score_str = "win white"
        elif score <= -winning_value:
            score_str = "win black"
        else:
            score_str = f"mobility {score}"

        print(f"info depth {d} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} pv {move_str}")
