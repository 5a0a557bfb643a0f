"""Node.js CLI template (Node.js + Commander + Inquirer).

The generated tool is itself a small scaffolder: it copies a template
directory, replacing ``__variable__`` markers in file names and contents.
No container file is generated for this template.
"""

from __future__ import annotations

from stackgen.models import TemplateType
from stackgen.scaffolder.blueprints import (
    DependencyGroup,
    Fragment,
    TemplateCatalog,
    blueprint,
    when_linter,
    when_tests,
)

ROOT = "{{ project_name }}"

PACKAGE_JSON = '''\
{
  "name": "{{ project_name }}",
  "version": "1.0.0",
  "description": "Project scaffolding CLI",
  "main": "src/index.js",
  "bin": {
    "{{ project_name }}": "./bin/{{ project_name }}.js"
  },
  "files": ["bin", "src", "templates"],
  "scripts": {{ scripts | json_object(2) }},
  "dependencies": {{ dependencies | json_object(2) }},
  "devDependencies": {{ dev_dependencies | json_object(2) }},
  "engines": {
    "node": ">=18"
  }
}
'''

BIN_JS = '''\
#!/usr/bin/env node
"use strict";

const { run } = require("../src/index");

run(process.argv).catch((err) => {
  console.error(err.message);
  process.exit(1);
});
'''

INDEX_JS = '''\
"use strict";

const { Command } = require("commander");
const { version } = require("../package.json");
const { generate } = require("./commands/generate");

function buildProgram() {
  const program = new Command();
  program
    .name("{{ project_name }}")
    .description("Scaffold new projects from templates")
    .version(version);

  program
    .command("generate")
    .alias("g")
    .description("Generate a project from a template")
    .argument("[name]", "name of the new project")
    .option("-t, --template <template>", "template directory to use", "default")
    .option("-o, --output <dir>", "output directory", process.cwd())
    .action(generate);

  return program;
}

async function run(argv) {
  await buildProgram().parseAsync(argv);
}

module.exports = { buildProgram, run };
'''

GENERATE_JS = '''\
"use strict";

const path = require("path");
const chalk = require("chalk");
const inquirer = require("inquirer");
const { copyTemplate } = require("../utils/files");

const TEMPLATES_DIR = path.join(__dirname, "..", "..", "templates");

async function generate(name, options) {
  let projectName = name;
  if (!projectName) {
    const answers = await inquirer.prompt([
      { type: "input", name: "projectName", message: "Project name:" },
    ]);
    projectName = answers.projectName;
  }

  const source = path.join(TEMPLATES_DIR, options.template);
  const target = path.join(options.output, projectName);
  const written = await copyTemplate(source, target, { projectName });

  console.log(chalk.green(`Created ${projectName} (${written.length} files)`));
}

module.exports = { generate };
'''

FILES_JS = '''\
"use strict";

const path = require("path");
const fs = require("fs-extra");

const VARIABLE_PATTERN = /__([a-zA-Z]+)__/g;

function substitute(text, variables) {
  return text.replace(VARIABLE_PATTERN, (match, key) =>
    Object.prototype.hasOwnProperty.call(variables, key) ? String(variables[key]) : match,
  );
}

async function copyTemplate(source, target, variables) {
  const written = [];
  const entries = await fs.readdir(source, { withFileTypes: true });
  await fs.ensureDir(target);

  for (const entry of entries) {
    const from = path.join(source, entry.name);
    const to = path.join(target, substitute(entry.name, variables));
    if (entry.isDirectory()) {
      written.push(...(await copyTemplate(from, to, variables)));
    } else {
      const content = await fs.readFile(from, "utf8");
      await fs.writeFile(to, substitute(content, variables));
      written.push(to);
    }
  }
  return written;
}

module.exports = { copyTemplate, substitute };
'''

DEFAULT_TEMPLATE_README = '''\
# __projectName__

Scaffolded with {{ project_name }}.
'''

README = '''\
# {{ project_name }}

Node.js command-line tool built with Commander and Inquirer.

## Usage

```bash
npm install -g .
{{ project_name }} generate my-app
{{ project_name }} generate --template default --output ./out
```

Templates live under `templates/`.  Every `__projectName__` marker in a file
name or file body is replaced with the name of the generated project.
'''

README_TESTS = '''
## Testing

```bash
npm test
```
'''

README_LINT = '''
## Linting

```bash
npm run lint
```
'''

JEST_CONFIG = '''\
module.exports = {
  testEnvironment: "node",
  roots: ["<rootDir>/tests"],
};
'''

FILES_TEST_JS = '''\
"use strict";

const { substitute } = require("../src/utils/files");

describe("substitute", () => {
  it("replaces known variables", () => {
    expect(substitute("# __projectName__", { projectName: "demo" })).toBe("# demo");
  });

  it("leaves unknown variables untouched", () => {
    expect(substitute("__missing__", {})).toBe("__missing__");
  });
});
'''

ESLINTRC = '''\
{
  "root": true,
  "extends": ["eslint:recommended"],
  "parserOptions": {
    "ecmaVersion": 2022,
    "sourceType": "script"
  },
  "env": {
    "node": true,
    "es2022": true
  },
  "overrides": [
    {
      "files": ["tests/**/*.js"],
      "env": { "jest": true }
    }
  ]
}
'''

CATALOG = TemplateCatalog(
    template=TemplateType.CLI_TOOL,
    blueprints=(
        # Baseline
        blueprint(f"{ROOT}/package.json", PACKAGE_JSON),
        blueprint(f"{ROOT}/bin/{ROOT}.js", BIN_JS),
        blueprint(f"{ROOT}/src/index.js", INDEX_JS),
        blueprint(f"{ROOT}/src/commands/generate.js", GENERATE_JS),
        blueprint(f"{ROOT}/src/utils/files.js", FILES_JS),
        blueprint(f"{ROOT}/templates/default/README.md", DEFAULT_TEMPLATE_README),
        blueprint(
            f"{ROOT}/.gitignore",
            "node_modules/\n.env\n",
            Fragment("coverage/\n", when=when_tests),
        ),
        blueprint(
            f"{ROOT}/README.md",
            README,
            Fragment(README_TESTS, when=when_tests),
            Fragment(README_LINT, when=when_linter),
        ),
        # Tests
        blueprint(f"{ROOT}/jest.config.js", JEST_CONFIG, when=when_tests),
        blueprint(f"{ROOT}/tests/files.test.js", FILES_TEST_JS, when=when_tests),
        # Linter
        blueprint(f"{ROOT}/.eslintrc.json", ESLINTRC, when=when_linter),
    ),
    dependencies={
        "scripts": (
            DependencyGroup((("start", "node src/index.js"),)),
            DependencyGroup((("test", "jest"),), when=when_tests),
            DependencyGroup((("lint", "eslint ."),), when=when_linter),
        ),
        "dependencies": (
            DependencyGroup((
                ("chalk", "^4.1.2"),
                ("commander", "^12.0.0"),
                ("fs-extra", "^11.2.0"),
                ("inquirer", "^8.2.6"),
            )),
        ),
        "dev_dependencies": (
            DependencyGroup((("jest", "^29.7.0"),), when=when_tests),
            DependencyGroup((("eslint", "^8.57.0"),), when=when_linter),
        ),
    },
)
