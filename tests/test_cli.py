import pandas as pd
from typer.testing import CliRunner

from emranking.cli import app
from emranking.config import RankingConfig

runner = CliRunner()


def test_rank_command(input_tree):
    result = runner.invoke(app, ["rank", "--root", str(input_tree)])
    assert result.exit_code == 0, result.output
    config = RankingConfig.from_root(input_tree)
    assert (config.output_dir / config.hierarchical_output).exists()
    assert (config.output_dir / config.points_output).exists()


def test_rank_command_fails_without_inputs(tmp_path):
    result = runner.invoke(app, ["rank", "--root", str(tmp_path)])
    assert result.exit_code == 1


def test_pathways_command_writes_table(tmp_path):
    checklist = tmp_path / "checklist.tsv"
    pd.DataFrame({
        "taxonKey": [1, 2, 3],
        "pathway": ["cbd_2014_pathway:escape_pet", "cbd_2014_pathway:escape_pet",
                    "cbd_2014_pathway:escape_aquarium"],
    }).to_csv(checklist, sep="\t", index=False)
    output = tmp_path / "pathways.tsv"
    result = runner.invoke(app, ["pathways", str(checklist), "--level", "2",
                                 "--category", "escape", "--output", str(output)])
    assert result.exit_code == 0, result.output
    table = pd.read_csv(output, sep="\t")
    assert table["pathway_level2"].tolist() == ["pet", "aquarium"]
