import json

from merkle_whitelist.cli import main


def test_generate_and_verify(tmp_path, capsys):
    out = tmp_path / "merkleTree.json"
    assert main(["generate", "-o", str(out)]) == 0
    printed = capsys.readouterr().out
    data = json.loads(out.read_text())
    assert f"Merkle Root: {data['merkleRoot']}" in printed
    assert "Proof Valid: True" in printed
    assert len(data["whiteList"]) == 3

    assert main(["verify", str(out)]) == 0
    assert "All 3 entries verified" in capsys.readouterr().out


def test_generate_from_entries_file(tmp_path, sample_records):
    src = tmp_path / "entries.json"
    src.write_text(json.dumps(sample_records[:2]))
    out = tmp_path / "out.json"
    assert main(["generate", "-q", "-i", str(src), "-o", str(out)]) == 0
    assert len(json.loads(out.read_text())["whiteList"]) == 2


def test_verify_reports_failures(tmp_path, capsys):
    out = tmp_path / "merkleTree.json"
    main(["generate", "-q", "-o", str(out)])
    data = json.loads(out.read_text())
    data["merkleRoot"] = "0x" + "00" * 32
    out.write_text(json.dumps(data))
    capsys.readouterr()
    assert main(["verify", str(out)]) == 1
    assert "3/3 entries FAILED" in capsys.readouterr().out


def test_proof_command(tmp_path, capsys):
    out = tmp_path / "merkleTree.json"
    main(["generate", "-q", "-o", str(out)])
    data = json.loads(out.read_text())
    capsys.readouterr()
    assert main(["proof", str(out), "--index", "2"]) == 0
    printed = capsys.readouterr().out
    assert data["whiteList"][2]["proof"][0] in printed
    assert "proof = new bytes32[](1);" in printed
    assert main(["proof", str(out), "--index", "3"]) == 1


def test_bad_entries_file_exits_nonzero(tmp_path):
    src = tmp_path / "entries.json"
    src.write_text(json.dumps([{"address": "0x1234", "amount": "1",
                                "refClaimUUID": "0x" + "00" * 32, "asset": "0x" + "00" * 20}]))
    assert main(["generate", "-q", "-i", str(src), "-o", str(tmp_path / "o.json")]) == 1
    assert main(["generate", "-q", "-i", str(tmp_path / "missing.json")]) == 1


def generated(tmp_path):
    out = tmp_path / "merkleTree.json"
    assert main(["generate", "-q", "-o", str(out)]) == 0
    return out, json.loads(out.read_text())


def test_verify_malformed_records_exit_nonzero(tmp_path, capsys):
    out, data = generated(tmp_path)
    data["whiteList"][0]["proof"] = None
    data["whiteList"][1] = 5
    out.write_text(json.dumps(data))
    capsys.readouterr()
    assert main(["verify", str(out)]) == 1
    assert "2/3 entries FAILED: [0, 1]" in capsys.readouterr().out


def test_verify_empty_whitelist_exits_nonzero(tmp_path):
    out, data = generated(tmp_path)
    data["whiteList"] = []
    out.write_text(json.dumps(data))
    assert main(["verify", str(out)]) == 1


def test_proof_command_missing_fields(tmp_path):
    out, data = generated(tmp_path)
    del data["whiteList"][0]["proof"]
    del data["whiteList"][1]["leaf"]
    out.write_text(json.dumps(data))
    assert main(["proof", str(out), "--index", "0"]) == 1
    assert main(["proof", str(out), "--index", "1"]) == 1
